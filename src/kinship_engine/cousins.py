"""Cousin finder: Nth degree cousins and cousin degree calculation.

Cousin Terminology:
- Degree: shared-ancestor generation distance minus one (first cousins
  share a grandparent, second cousins a great-grandparent)
- Removal: generation difference between the two cousins (0 = same
  generation, 1 = once removed, ...)

Distances are measured to the nearest common ancestor over *all* parents
(multi-parent BFS), where nearest means the smallest combined distance,
then the smallest distance from the first person. Half-relations and
remarriages are therefore handled, and cyclic data cannot loop.
"""
from __future__ import annotations

from collections import deque

from .models import CousinDegree, CousinResult
from .snapshot import GraphSnapshot


def _ancestors_at_level(person_id: str, levels: int, snapshot: GraphSnapshot) -> list[str]:
    """Ancestors exactly ``levels`` generations up, through every parent."""
    layer = {person_id}
    for _ in range(levels):
        layer = {
            parent_id
            for current_id in layer
            for parent_id in snapshot.parents_of(current_id)
            if parent_id in snapshot
        }
        if not layer:
            break
    return sorted(layer)


def _descendants_within(ancestor_id: str, levels: int, snapshot: GraphSnapshot) -> list[str]:
    """The ancestor plus every descendant at most ``levels`` generations down."""
    seen = {ancestor_id}
    order = [ancestor_id]
    queue: deque[tuple[str, int]] = deque([(ancestor_id, 0)])

    while queue:
        current_id, depth = queue.popleft()
        if depth >= levels:
            continue
        for child_id in snapshot.children_of(current_id):
            if child_id in seen:
                continue
            seen.add(child_id)
            order.append(child_id)
            queue.append((child_id, depth + 1))

    return order


def _direct_lineage(person_id: str, snapshot: GraphSnapshot) -> set[str]:
    """Every ancestor and every descendant of a person (all branches)."""
    lineage = set(snapshot.ancestor_distances(person_id))

    visited = {person_id}
    queue: deque[str] = deque([person_id])
    while queue:
        current_id = queue.popleft()
        for child_id in snapshot.children_of(current_id):
            if child_id not in visited:
                visited.add(child_id)
                queue.append(child_id)

    lineage |= visited
    lineage.discard(person_id)
    return lineage


def _nearest_distances(
    distances1: dict[str, int],
    person2_id: str,
    snapshot: GraphSnapshot,
) -> tuple[int, int] | None:
    """Distance pair to the nearest common ancestor, or None when unrelated."""
    distances2 = snapshot.ancestor_distances(person2_id)
    candidates = [
        (d1 + distances2[ancestor_id], d1, distances2[ancestor_id], ancestor_id)
        for ancestor_id, d1 in distances1.items()
        if ancestor_id in distances2
    ]
    if not candidates:
        return None
    _, d1, d2, _ = min(candidates)
    return d1, d2


def find_cousins(
    person_id: str,
    degree: int,
    snapshot: GraphSnapshot,
) -> list[CousinResult]:
    """Find all cousins of the given degree.

    Algorithm:
    1. Collect ancestors exactly (degree + 1) generations up
    2. From each, collect descendants within (degree + 1) generations down
    3. Drop the person and their direct ancestors/descendants
    4. Keep candidates whose computed cousin degree equals ``degree``

    Args:
        person_id: Person to find cousins for
        degree: 1 for first cousins, 2 for second, ...
        snapshot: Family graph to traverse

    Returns:
        Cousins sorted by removal, then full name
    """
    if degree < 1 or person_id not in snapshot:
        return []

    levels = degree + 1
    lineage = _direct_lineage(person_id, snapshot)
    own_distances = snapshot.ancestor_distances(person_id)
    claimed: set[str] = {person_id}
    results: list[CousinResult] = []

    for ancestor_id in _ancestors_at_level(person_id, levels, snapshot):
        for candidate_id in _descendants_within(ancestor_id, levels, snapshot):
            if candidate_id in claimed or candidate_id in lineage:
                continue
            candidate = snapshot.person(candidate_id)
            if candidate is None:
                continue

            pair = _nearest_distances(own_distances, candidate_id, snapshot)
            if pair is None:
                continue
            distance1, distance2 = pair
            if min(distance1, distance2) - 1 != degree:
                continue

            results.append(
                CousinResult(
                    person=candidate,
                    degree=degree,
                    removal=abs(distance1 - distance2),
                )
            )
            claimed.add(candidate_id)

    results.sort(key=lambda r: (r.removal, r.person.full_name.casefold(), r.person.id))
    return results


def calculate_cousin_degree(
    person1_id: str,
    person2_id: str,
    snapshot: GraphSnapshot,
) -> CousinDegree | None:
    """Calculate the cousin relationship between two people.

    Returns None for the same person, for unrelated or unknown people, for a
    direct ancestor/descendant pair, and for siblings (degree would be 0).

    Example:
        >>> calculate_cousin_degree("alice", "bob", snapshot)
        CousinDegree(degree=1, removal=0)
    """
    if person1_id == person2_id:
        return None
    if person1_id not in snapshot or person2_id not in snapshot:
        return None

    pair = _nearest_distances(snapshot.ancestor_distances(person1_id), person2_id, snapshot)
    if pair is None:
        return None

    distance1, distance2 = pair
    if distance1 == 0 or distance2 == 0:
        return None

    degree = min(distance1, distance2) - 1
    if degree < 1:
        return None

    return CousinDegree(degree=degree, removal=abs(distance1 - distance2))
