"""Tests for descendant traversal and the combined relatives query."""
from __future__ import annotations

from kinship_engine import (
    DescendantQueryOptions,
    count_ancestors,
    count_descendants,
    find_ancestors,
    find_descendants,
    get_all_relatives,
    get_descendants_at_generation,
    get_descendants_by_generation,
)


def _ids(results):
    return {r.person.id for r in results}


class TestFindDescendants:
    """Tests for find_descendants."""

    def test_all_descendants(self, family):
        """Children, grandchildren and great-grandchildren with generations."""
        results = find_descendants("frank", family)

        generations = {r.person.id: r.generation for r in results}
        assert generations == {
            "david": 1,
            "susan": 1,
            "kid": 2,
            "amy": 2,
            "lucy": 2,
            "baby": 3,
            "mia": 3,
        }

    def test_sorted_by_generation(self, family):
        """Results never go back up a generation."""
        generations = [r.generation for r in find_descendants("george", family)]
        assert generations == sorted(generations)

    def test_generation_limit(self, family):
        """Traversal stops at max_generations."""
        results = find_descendants("frank", family, DescendantQueryOptions(max_generations=1))
        assert _ids(results) == {"david", "susan"}

    def test_living_only(self, family):
        """include_living alone keeps people recorded as living."""
        options = DescendantQueryOptions(include_living=True)
        assert _ids(find_descendants("frank", family, options)) == {"kid", "amy", "lucy", "baby"}

    def test_deceased_only(self, family):
        """include_deceased alone keeps everyone not recorded as living."""
        options = DescendantQueryOptions(include_deceased=True)
        assert _ids(find_descendants("frank", family, options)) == {"david", "susan", "mia"}

    def test_both_flags_keep_everyone(self, family):
        """Setting both flags is the same as setting neither."""
        both = DescendantQueryOptions(include_living=True, include_deceased=True)
        assert _ids(find_descendants("frank", family, both)) == _ids(find_descendants("frank", family))

    def test_relationship_labels(self, family):
        """Labels follow the generation distance."""
        labels = {r.person.id: r.relationship_label for r in find_descendants("frank", family)}
        assert labels["david"] == "child"
        assert labels["kid"] == "grandchild"
        assert labels["baby"] == "great-grandchild"

    def test_leaf(self, family):
        """A person with no children has no descendants."""
        assert find_descendants("owen", family) == []

    def test_unknown_person(self, family):
        assert find_descendants("nobody", family) == []

    def test_cycle_terminates(self, cyclic):
        """Cyclic data neither loops nor lists the start person."""
        results = find_descendants("a", cyclic)
        assert {r.person.id: r.generation for r in results} == {"b": 1, "c": 2}


class TestDescendantHelpers:
    """Tests for generation helpers and counting."""

    def test_at_generation(self, family):
        people = get_descendants_at_generation("frank", 2, family)
        assert {p.id for p in people} == {"kid", "amy", "lucy"}

    def test_at_generation_below_one(self, family):
        assert get_descendants_at_generation("frank", 0, family) == []

    def test_count(self, family):
        assert count_descendants("george", family) == 11

    def test_count_with_cutoff(self, family):
        """Counting honours the generation limit."""
        assert count_descendants("george", family, max_generations=2) == 5

    def test_count_negative_cutoff(self, family):
        assert count_descendants("george", family, max_generations=-1) == 0

    def test_by_generation(self, family):
        grouped = get_descendants_by_generation("george", family)

        assert sorted(grouped) == [1, 2, 3, 4]
        assert {p.id for p in grouped[4]} == {"baby", "mia"}


class TestAllRelatives:
    """Tests for get_all_relatives."""

    def test_combines_both_directions(self, family):
        relatives = get_all_relatives("david", family)

        assert _ids(relatives.ancestors) == {"frank", "ruth", "george", "helen"}
        assert _ids(relatives.descendants) == {"kid", "amy", "baby"}
        assert relatives.total_count == 7

    def test_independent_limits(self, family):
        relatives = get_all_relatives("david", family, ancestor_generations=1, descendant_generations=1)

        assert _ids(relatives.ancestors) == {"frank", "ruth"}
        assert _ids(relatives.descendants) == {"kid", "amy"}

    def test_to_dict(self, family):
        data = get_all_relatives("kid", family, ancestor_generations=1).to_dict()

        assert data["total_count"] == 3
        assert {a["person"]["id"] for a in data["ancestors"]} == {"david", "emma"}
        assert data["descendants"][0]["relationship_label"] == "child"

    def test_negative_limits(self, family):
        """A negative limit empties only its own direction."""
        relatives = get_all_relatives("david", family, ancestor_generations=-1)

        assert relatives.ancestors == []
        assert _ids(relatives.descendants) == {"kid", "amy", "baby"}
        assert get_all_relatives("david", family, descendant_generations=-2).descendants == []

    def test_unknown_person(self, family):
        assert get_all_relatives("nobody", family).total_count == 0


class TestAncestorDescendantConsistency:
    """Ancestor and descendant queries agree on generations."""

    def test_generations_mirror(self, family):
        for ancestor in find_ancestors("mia", family):
            found = {d.person.id: d.generation for d in find_descendants(ancestor.person.id, family)}
            assert found["mia"] == ancestor.generation

    def test_count_cutoff_never_exceeds_full_count(self, family):
        full = count_ancestors("baby", family)
        for cutoff in range(0, 6):
            assert count_ancestors("baby", family, max_generations=cutoff) <= full
        assert count_ancestors("baby", family, max_generations=4) == full
