"""Tests for the cousin finder."""
from __future__ import annotations

from kinship_engine import (
    CousinDegree,
    GraphSnapshot,
    Person,
    calculate_cousin_degree,
    find_cousins,
)


class TestFindCousins:
    """Tests for find_cousins."""

    def test_first_cousins(self, family):
        """Children of a parent's siblings, excluding own siblings."""
        results = find_cousins("kid", 1, family)

        assert [r.person.id for r in results] == ["lucy"]
        assert results[0].degree == 1
        assert results[0].removal == 0
        assert results[0].label == "first cousin"

    def test_second_cousins(self, family):
        results = find_cousins("kid", 2, family)

        assert [r.person.id for r in results] == ["owen"]
        assert results[0].label == "second cousin"

    def test_same_generation_both_ways(self, family):
        """Cousinship is symmetric."""
        assert [r.person.id for r in find_cousins("lucy", 1, family)] == ["amy", "kid"]

    def test_no_cousins(self, family):
        """An only grandchild line has no first cousins."""
        assert find_cousins("owen", 1, family) == []

    def test_invalid_degree(self, family):
        assert find_cousins("kid", 0, family) == []
        assert find_cousins("kid", -1, family) == []

    def test_unknown_person(self, family):
        assert find_cousins("nobody", 1, family) == []

    def test_sorted_by_name(self):
        """Cousins of the same removal are ordered by full name."""
        snapshot = GraphSnapshot.from_edges(
            [Person(i, first_name=i.title()) for i in ("gp", "p1", "p2", "me", "zed", "aaron", "u1")],
            [
                ("gp", "p1"),
                ("gp", "p2"),
                ("gp", "u1"),
                ("p1", "me"),
                ("p2", "zed"),
                ("u1", "aaron"),
            ],
        )
        results = find_cousins("me", 1, snapshot)
        assert [r.person.id for r in results] == ["aaron", "zed"]

    def test_half_cousins_found(self):
        """Cousins through a single shared grandparent are found."""
        snapshot = GraphSnapshot.from_edges(
            [Person(i) for i in ("gp", "wife1", "wife2", "p1", "p2", "me", "half")],
            [
                ("gp", "p1"),
                ("wife1", "p1"),
                ("gp", "p2"),
                ("wife2", "p2"),
                ("p1", "me"),
                ("p2", "half"),
            ],
        )
        results = find_cousins("me", 1, snapshot)
        assert [r.person.id for r in results] == ["half"]

    def test_cycle_terminates(self, cyclic):
        assert find_cousins("c", 1, cyclic) == []

    def test_to_dict(self, family):
        data = find_cousins("kid", 1, family)[0].to_dict()

        assert data["person"]["id"] == "lucy"
        assert data["label"] == "first cousin"


class TestCalculateCousinDegree:
    """Tests for calculate_cousin_degree."""

    def test_first_cousins(self, family):
        assert calculate_cousin_degree("kid", "lucy", family) == CousinDegree(degree=1, removal=0)

    def test_first_cousin_once_removed(self, family):
        """A first cousin's child is a first cousin once removed."""
        assert calculate_cousin_degree("kid", "mia", family) == CousinDegree(degree=1, removal=1)
        assert calculate_cousin_degree("mia", "kid", family) == CousinDegree(degree=1, removal=1)

    def test_second_cousins(self, family):
        result = calculate_cousin_degree("kid", "owen", family)

        assert result == CousinDegree(degree=2, removal=0)
        assert result.label == "second cousin"

    def test_siblings_are_not_cousins(self, family):
        assert calculate_cousin_degree("kid", "amy", family) is None

    def test_aunt_is_not_cousin(self, family):
        assert calculate_cousin_degree("kid", "susan", family) is None

    def test_direct_line_is_not_cousin(self, family):
        assert calculate_cousin_degree("kid", "george", family) is None
        assert calculate_cousin_degree("george", "kid", family) is None

    def test_same_person(self, family):
        assert calculate_cousin_degree("kid", "kid", family) is None

    def test_unrelated(self, family):
        assert calculate_cousin_degree("kid", "stranger", family) is None

    def test_unknown_person(self, family):
        assert calculate_cousin_degree("kid", "nobody", family) is None

    def test_cycle_terminates(self, cyclic):
        assert calculate_cousin_degree("a", "c", cyclic) is None
