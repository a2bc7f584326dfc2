"""Tests for GraphSnapshot construction and lookups."""
from __future__ import annotations

import pytest

from kinship_engine import GraphSnapshot, InvalidRelationshipRecord, Person


@pytest.fixture
def people():
    return [Person("kid"), Person("dad"), Person("mom"), Person("baby"), Person("sis")]


class TestFromEdges:
    """Tests for building from (parent, child) and spouse pairs."""

    def test_both_directions(self, family):
        assert family.parents_of("kid") == ["david", "emma"]
        assert family.children_of("david") == ["amy", "kid"]
        assert family.spouses_of("emma") == ["david"]
        assert family.spouses_of("david") == ["emma"]

    def test_unknown_ids(self, family):
        assert family.parents_of("nobody") == []
        assert family.person("nobody") is None
        assert "nobody" not in family

    def test_len_and_contains(self, family):
        assert len(family) == 18
        assert "kid" in family

    def test_stats(self, family):
        assert family.stats() == {"people": 18, "parent_child_edges": 19, "spouse_pairs": 5}

    def test_adjacency_frozen(self, family):
        """Neighbor sets cannot be changed through the snapshot."""
        assert isinstance(family.child_to_parents["kid"], frozenset)
        with pytest.raises(AttributeError):
            family.child_to_parents["kid"].add("stranger")

    def test_source_maps_copied(self):
        people = {"a": Person("a")}
        snapshot = GraphSnapshot(people=people)
        people["b"] = Person("b")
        assert "b" not in snapshot

    def test_ancestor_distances(self, family):
        distances = family.ancestor_distances("kid")

        assert distances["kid"] == 0
        assert distances["david"] == 1
        assert distances["george"] == 3
        assert "clara" not in distances


class TestFromRecords:
    """Tests for building from stored relationship rows."""

    def test_parent_and_child_rows(self, people):
        snapshot = GraphSnapshot.from_records(
            people,
            [
                {"person_id": "kid", "related_person_id": "dad", "type": "PARENT"},
                {"person_id": "mom", "related_person_id": "kid", "type": "child"},
            ],
        )
        assert snapshot.parents_of("kid") == ["dad", "mom"]
        assert snapshot.children_of("mom") == ["kid"]

    def test_spouse_row_symmetric(self, people):
        snapshot = GraphSnapshot.from_records(
            people,
            [{"person_id": "dad", "related_person_id": "mom", "type": "SPOUSE"}],
        )
        assert snapshot.spouses_of("mom") == ["dad"]

    def test_sibling_and_derived_rows_ignored(self, people):
        snapshot = GraphSnapshot.from_records(
            people,
            [
                {"person_id": "kid", "related_person_id": "sis", "type": "SIBLING"},
                {"person_id": "kid", "related_person_id": "mom", "type": "STEP_PARENT"},
                {"person_id": "dad", "related_person_id": "sis", "type": "PARENT_IN_LAW"},
            ],
        )
        assert snapshot.stats() == {"people": 5, "parent_child_edges": 0, "spouse_pairs": 0}

    def test_self_row_skipped(self, people):
        snapshot = GraphSnapshot.from_records(
            people,
            [{"person_id": "kid", "related_person_id": "kid", "type": "PARENT"}],
        )
        assert snapshot.parents_of("kid") == []

    def test_unknown_type(self, people):
        with pytest.raises(InvalidRelationshipRecord) as exc_info:
            GraphSnapshot.from_records(
                people,
                [{"person_id": "kid", "related_person_id": "dad", "type": "GODPARENT"}],
            )
        assert "GODPARENT" in exc_info.value.reason

    def test_missing_id(self, people):
        with pytest.raises(InvalidRelationshipRecord):
            GraphSnapshot.from_records(people, [{"person_id": "kid", "type": "PARENT"}])
