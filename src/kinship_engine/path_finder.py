"""Relationship path finder using BFS over parent, child and spouse edges.

Finds the shortest hop path between two people, treating all three edge
kinds as equal-weight hops, and names the relationship from the sequence
of edge kinds walked. Marriage loops are handled by the visited set.
"""
from __future__ import annotations

from collections import deque

from .config import CONFIG
from .labels import gendered_term
from .models import EdgeKind, Person, RelationshipPath
from .snapshot import GraphSnapshot


def _neighbors(person_id: str, snapshot: GraphSnapshot) -> list[tuple[str, EdgeKind]]:
    neighbors = [(p, EdgeKind.PARENT) for p in snapshot.parents_of(person_id)]
    neighbors += [(c, EdgeKind.CHILD) for c in snapshot.children_of(person_id)]
    neighbors += [(s, EdgeKind.SPOUSE) for s in snapshot.spouses_of(person_id)]
    return [(n, kind) for n, kind in neighbors if n in snapshot]


def _rebuild(
    target_id: str,
    came_from: dict[str, tuple[str, EdgeKind] | None],
) -> tuple[list[str], list[EdgeKind]]:
    ids = [target_id]
    edges: list[EdgeKind] = []
    step = came_from[target_id]
    while step is not None:
        previous_id, kind = step
        ids.append(previous_id)
        edges.append(kind)
        step = came_from[previous_id]
    ids.reverse()
    edges.reverse()
    return ids, edges


def find_relationship_path(
    person1_id: str,
    person2_id: str,
    snapshot: GraphSnapshot,
    gender_neutral: bool | None = None,
) -> RelationshipPath | None:
    """Find the shortest relationship path from person 1 to person 2.

    Args:
        person1_id: Starting person
        person2_id: Target person
        snapshot: Family graph to traverse
        gender_neutral: Neutral wording for targets of unknown gender;
            defaults to the KINSHIP_GENDER_NEUTRAL_LABELS setting

    Returns:
        RelationshipPath if the two are connected, None otherwise
    """
    if person1_id == person2_id:
        person = snapshot.person(person1_id)
        if person is None:
            return None
        return RelationshipPath(path=[person], edge_types=[], relationship="self", distance=0)

    if person1_id not in snapshot or person2_id not in snapshot:
        return None

    came_from: dict[str, tuple[str, EdgeKind] | None] = {person1_id: None}
    queue: deque[str] = deque([person1_id])

    while queue:
        current_id = queue.popleft()

        for neighbor_id, kind in _neighbors(current_id, snapshot):
            if neighbor_id in came_from:
                continue
            came_from[neighbor_id] = (current_id, kind)

            if neighbor_id == person2_id:
                ids, edges = _rebuild(neighbor_id, came_from)
                path = [snapshot.people[i] for i in ids]
                return RelationshipPath(
                    path=path,
                    edge_types=edges,
                    relationship=calculate_relationship_name(
                        path, snapshot, edges, gender_neutral=gender_neutral
                    ),
                    distance=len(edges),
                )

            queue.append(neighbor_id)

    return None


def _leading_run(edges: list[EdgeKind], kind: EdgeKind, start: int) -> int:
    count = 0
    for edge in edges[start:]:
        if edge != kind:
            break
        count += 1
    return count


def _share_parent(person_a: Person, person_b: Person, snapshot: GraphSnapshot) -> bool:
    parents_a = set(snapshot.parents_of(person_a.id))
    return any(p in parents_a for p in snapshot.parents_of(person_b.id))


def calculate_relationship_name(
    path: list[Person],
    snapshot: GraphSnapshot,
    edges: list[EdgeKind] | None = None,
    gender_neutral: bool | None = None,
) -> str:
    """Name a relationship from its path and edge-kind sequence.

    Rules are checked in order and the first match wins, so e.g. a
    [parent, child] path is always "brother"/"sister" and never reaches the
    nephew/niece rule. Cousin degree is not computed here; see
    ``cousins.calculate_cousin_degree``.

    Unknown target gender uses the female-coded term unless
    ``gender_neutral`` is set.
    """
    if gender_neutral is None:
        gender_neutral = CONFIG.gender_neutral_labels

    if len(path) == 0:
        return "unknown"
    if len(path) == 1:
        return "self"

    target = path[-1]

    def term(male: str, female: str, neutral: str) -> str:
        return gendered_term(target.gender, male, female, neutral, gender_neutral)

    if len(path) == 2:
        if not edges:
            return "relative"
        first = edges[0]
        if first == EdgeKind.PARENT:
            return term("father", "mother", "parent")
        if first == EdgeKind.CHILD:
            return term("son", "daughter", "child")
        if first == EdgeKind.SPOUSE:
            return term("husband", "wife", "spouse")
        return "relative"

    if not edges:
        return "distant relative"

    up = _leading_run(edges, EdgeKind.PARENT, 0)
    down = _leading_run(edges, EdgeKind.CHILD, up)
    count = len(edges)

    if up == 1 and down == 1 and count == 2:
        return term("brother", "sister", "sibling")
    if up == 2 and down == 0 and count == 2:
        return term("grandfather", "grandmother", "grandparent")
    if up == 0 and down == 2 and count == 2:
        return term("grandson", "granddaughter", "grandchild")
    if up == 3 and down == 0 and count == 3:
        return term("great-grandfather", "great-grandmother", "great-grandparent")
    if up == 0 and down == 3 and count == 3:
        return term("great-grandson", "great-granddaughter", "great-grandchild")
    if up == 1 and down == 1 and count == 3:
        return term("uncle", "aunt", "uncle/aunt")
    if edges == [EdgeKind.PARENT, EdgeKind.CHILD] and _share_parent(path[0], path[1], snapshot):
        return term("nephew", "niece", "nephew/niece")
    if EdgeKind.SPOUSE in edges:
        return "relative by marriage"
    if up >= 1 and down >= 1 and up == down:
        return "cousin"
    return "distant relative"
