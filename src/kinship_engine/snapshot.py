"""Immutable family graph snapshot consumed by every traversal.

A snapshot bundles the person lookup with the three adjacency structures
(child -> parents, parent -> children, spouse <-> spouse). All engine
functions take a snapshot instead of loose maps, so there is exactly one
container shape for adjacency data.

Neighbor accessors return identifiers in sorted order. Traversal results
(which parent is visited first, which path wins a tie) therefore do not
depend on set iteration order, which varies between interpreter runs.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidRelationshipRecord
from .labels import RelationshipType
from .logging import get_logger
from .models import Person

logger = get_logger(__name__)

Adjacency = Mapping[str, frozenset[str]]


def _freeze(adjacency: Mapping[str, Iterable[str]] | None) -> dict[str, frozenset[str]]:
    if not adjacency:
        return {}
    return {key: frozenset(values) for key, values in adjacency.items()}


@dataclass(frozen=True, eq=False)
class GraphSnapshot:
    """Read-only view of a family graph for the duration of a query.

    The caller guarantees that ``child_to_parents`` and
    ``parent_to_children`` describe the same edges in both directions.
    Identifiers referenced by an edge but missing from ``people`` are
    skipped by every traversal.

    Example:
        >>> snapshot = GraphSnapshot.from_edges(
        ...     people=[Person("dad", "John", "Doe"),
        ...             Person("kid", "Jack", "Doe")],
        ...     parent_child_pairs=[("dad", "kid")],
        ... )
        >>> snapshot.parents_of("kid")
        ['dad']
    """

    people: Mapping[str, Person] = field(default_factory=dict)
    child_to_parents: Adjacency = field(default_factory=dict)
    parent_to_children: Adjacency = field(default_factory=dict)
    spouses: Adjacency = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "people", dict(self.people))
        object.__setattr__(self, "child_to_parents", _freeze(self.child_to_parents))
        object.__setattr__(self, "parent_to_children", _freeze(self.parent_to_children))
        object.__setattr__(self, "spouses", _freeze(self.spouses))

    # ─────────────────────────────────────────
    # Builders (system boundary)
    # ─────────────────────────────────────────

    @classmethod
    def from_edges(
        cls,
        people: Iterable[Person],
        parent_child_pairs: Iterable[tuple[str, str]] = (),
        spouse_pairs: Iterable[tuple[str, str]] = (),
    ) -> GraphSnapshot:
        """Build a consistent snapshot from (parent, child) and spouse pairs."""
        child_to_parents: dict[str, set[str]] = {}
        parent_to_children: dict[str, set[str]] = {}
        spouses: dict[str, set[str]] = {}

        for parent_id, child_id in parent_child_pairs:
            child_to_parents.setdefault(child_id, set()).add(parent_id)
            parent_to_children.setdefault(parent_id, set()).add(child_id)

        for person_a, person_b in spouse_pairs:
            spouses.setdefault(person_a, set()).add(person_b)
            spouses.setdefault(person_b, set()).add(person_a)

        return cls(
            people={person.id: person for person in people},
            child_to_parents=child_to_parents,
            parent_to_children=parent_to_children,
            spouses=spouses,
        )

    @classmethod
    def from_records(
        cls,
        people: Iterable[Person],
        records: Iterable[Mapping[str, Any]],
    ) -> GraphSnapshot:
        """Build a snapshot from stored relationship rows.

        Each row carries ``person_id``, ``related_person_id`` and ``type``:
        - PARENT: the related person is a parent of the person
        - CHILD: the related person is a child of the person
        - SPOUSE: symmetric marriage edge
        - SIBLING and derived (in-law, step) types carry no traversal edge

        Raises:
            InvalidRelationshipRecord: Row is missing ids or has an unknown type
        """
        parent_child: list[tuple[str, str]] = []
        spouse_pairs: list[tuple[str, str]] = []

        for record in records:
            person_id = record.get("person_id")
            related_id = record.get("related_person_id")
            if not person_id or not related_id:
                raise InvalidRelationshipRecord("relationship row is missing an id", dict(record))
            try:
                rel_type = RelationshipType(str(record.get("type", "")).upper())
            except ValueError as e:
                raise InvalidRelationshipRecord(
                    f"unknown relationship type {record.get('type')!r}", dict(record)
                ) from e

            if person_id == related_id:
                logger.warning("snapshot.self_relationship_skipped", person_id=person_id, type=rel_type.value)
                continue

            if rel_type == RelationshipType.PARENT:
                parent_child.append((related_id, person_id))
            elif rel_type == RelationshipType.CHILD:
                parent_child.append((person_id, related_id))
            elif rel_type == RelationshipType.SPOUSE:
                spouse_pairs.append((person_id, related_id))

        return cls.from_edges(people, parent_child, spouse_pairs)

    # ─────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────

    def person(self, person_id: str) -> Person | None:
        return self.people.get(person_id)

    def __contains__(self, person_id: object) -> bool:
        return person_id in self.people

    def __len__(self) -> int:
        return len(self.people)

    def parents_of(self, person_id: str) -> list[str]:
        return sorted(self.child_to_parents.get(person_id, ()))

    def children_of(self, person_id: str) -> list[str]:
        return sorted(self.parent_to_children.get(person_id, ()))

    def spouses_of(self, person_id: str) -> list[str]:
        return sorted(self.spouses.get(person_id, ()))

    def ancestor_distances(self, person_id: str) -> dict[str, int]:
        """Shortest generation distance to every ancestor of a person.

        Layered BFS over parents; the person maps to 0. Parents missing from
        the lookup are neither recorded nor expanded.

        Returns:
            Dict mapping ancestor_id -> generation distance
        """
        distances = {person_id: 0}
        queue: deque[str] = deque([person_id])

        while queue:
            current_id = queue.popleft()
            for parent_id in self.parents_of(current_id):
                if parent_id in distances or parent_id not in self.people:
                    continue
                distances[parent_id] = distances[current_id] + 1
                queue.append(parent_id)

        return distances

    def stats(self) -> dict[str, int]:
        """Counts of people and edges held by the snapshot."""
        return {
            "people": len(self.people),
            "parent_child_edges": sum(len(c) for c in self.parent_to_children.values()),
            "spouse_pairs": sum(len(s) for s in self.spouses.values()) // 2,
        }
