"""Common ancestor (LCA) search between two people.

Two algorithms are provided:

- ``find_common_ancestor`` builds the full ancestor-distance map of the first
  person, then walks upward from the second person and stops at the first
  ancestor found in that map. The result is the common ancestor nearest to
  the *second* person, which is not always the one with the smallest
  combined distance.
- ``find_all_common_ancestors`` intersects both distance maps and orders
  every shared ancestor by combined distance, so its first entry is the
  globally nearest common ancestor.

Both treat each person as distance 0 from themselves, so a direct ancestor
of the other person is its own common ancestor.
"""
from __future__ import annotations

from collections import deque

from .labels import kinship_label
from .models import CommonAncestorResult, KinshipResult
from .snapshot import GraphSnapshot


def find_common_ancestor(
    person1_id: str,
    person2_id: str,
    snapshot: GraphSnapshot,
) -> CommonAncestorResult | None:
    """Find the common ancestor nearest to person 2.

    Returns:
        The ancestor with its distance from each person, or None when the two
        people share no ancestor or either is unknown
    """
    if person1_id == person2_id:
        person = snapshot.person(person1_id)
        if person is None:
            return None
        return CommonAncestorResult(ancestor=person, distance1=0, distance2=0)

    if person1_id not in snapshot or person2_id not in snapshot:
        return None

    ancestors1 = snapshot.ancestor_distances(person1_id)

    visited: set[str] = {person2_id}
    queue: deque[tuple[str, int]] = deque([(person2_id, 0)])

    while queue:
        current_id, distance = queue.popleft()

        if current_id in ancestors1:
            return CommonAncestorResult(
                ancestor=snapshot.people[current_id],
                distance1=ancestors1[current_id],
                distance2=distance,
            )

        for parent_id in snapshot.parents_of(current_id):
            if parent_id in visited or parent_id not in snapshot:
                continue
            visited.add(parent_id)
            queue.append((parent_id, distance + 1))

    return None


def find_all_common_ancestors(
    person1_id: str,
    person2_id: str,
    snapshot: GraphSnapshot,
) -> list[CommonAncestorResult]:
    """Find every ancestor shared by two people.

    Returns:
        Shared ancestors sorted by combined distance, then by the distance
        from person 1, then from person 2 (identifier breaks exact ties)
    """
    if person1_id not in snapshot or person2_id not in snapshot:
        return []

    ancestors1 = snapshot.ancestor_distances(person1_id)
    ancestors2 = snapshot.ancestor_distances(person2_id)

    common = [
        CommonAncestorResult(
            ancestor=snapshot.people[ancestor_id],
            distance1=distance1,
            distance2=ancestors2[ancestor_id],
        )
        for ancestor_id, distance1 in ancestors1.items()
        if ancestor_id in ancestors2
    ]

    common.sort(key=lambda r: (r.total_distance, r.distance1, r.distance2, r.ancestor.id))
    return common


def describe_kinship(
    person_a_id: str,
    person_b_id: str,
    snapshot: GraphSnapshot,
) -> KinshipResult | None:
    """Describe how person B is related to person A by blood.

    Uses the globally nearest common ancestor (first entry of
    ``find_all_common_ancestors``) and labels the pair from the two
    generation distances.

    Returns:
        KinshipResult if related, None if no common ancestor or unknown ids
    """
    person_a = snapshot.person(person_a_id)
    person_b = snapshot.person(person_b_id)
    if person_a is None or person_b is None:
        return None

    common = find_all_common_ancestors(person_a_id, person_b_id, snapshot)
    if not common:
        return None

    nearest = common[0]
    return KinshipResult(
        person_a=person_a,
        person_b=person_b,
        relationship=kinship_label(nearest.distance1, nearest.distance2),
        common_ancestor=nearest.ancestor,
        generations_to_common_ancestor_a=nearest.distance1,
        generations_to_common_ancestor_b=nearest.distance2,
    )
