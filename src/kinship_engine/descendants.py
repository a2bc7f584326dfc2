"""Descendant queries with generation tracking and living/deceased filters."""
from __future__ import annotations

from collections import deque

from .ancestors import find_ancestors
from .logging import get_logger
from .models import (
    AllRelatives,
    AncestorQueryOptions,
    DescendantQueryOptions,
    DescendantResult,
    Person,
    clamp_generations,
)
from .snapshot import GraphSnapshot

logger = get_logger(__name__)


def _apply_living_filter(
    results: list[DescendantResult],
    options: DescendantQueryOptions,
) -> list[DescendantResult]:
    # Tri-state: exactly one flag narrows, both or neither keep everyone
    if options.include_living and not options.include_deceased:
        return [r for r in results if r.person.is_living is True]
    if options.include_deceased and not options.include_living:
        return [r for r in results if not r.person.is_living]
    return results


def find_descendants(
    person_id: str,
    snapshot: GraphSnapshot,
    options: DescendantQueryOptions | None = None,
) -> list[DescendantResult]:
    """Find all descendants of a person up to an optional generation limit.

    Uses BFS traversal following parent -> children edges. People with an
    unknown living flag count as deceased for the deceased-only filter.

    Args:
        person_id: Person to start from
        snapshot: Family graph to traverse
        options: Generation limit and living/deceased filter

    Returns:
        Descendants sorted by generation (children first)
    """
    options = options or DescendantQueryOptions()
    if person_id not in snapshot:
        return []

    results: list[DescendantResult] = []
    visited: set[str] = {person_id}
    queue: deque[tuple[str, int]] = deque([(person_id, 0)])

    while queue:
        current_id, generation = queue.popleft()

        if options.max_generations is not None and generation >= options.max_generations:
            continue

        for child_id in snapshot.children_of(current_id):
            if child_id in visited:
                continue
            child = snapshot.person(child_id)
            if child is None:
                logger.debug("descendants.dangling_child", person_id=current_id, child_id=child_id)
                continue

            visited.add(child_id)
            results.append(DescendantResult(person=child, generation=generation + 1))
            queue.append((child_id, generation + 1))

    results = _apply_living_filter(results, options)
    results.sort(key=lambda d: d.generation)
    return results


def get_descendants_at_generation(
    person_id: str,
    generation: int,
    snapshot: GraphSnapshot,
) -> list[Person]:
    """Get the descendants exactly ``generation`` steps down (2 = grandchildren)."""
    if generation < 1:
        return []
    results = find_descendants(
        person_id, snapshot, DescendantQueryOptions(max_generations=generation)
    )
    return [r.person for r in results if r.generation == generation]


def count_descendants(
    person_id: str,
    snapshot: GraphSnapshot,
    max_generations: int | None = None,
) -> int:
    return len(
        find_descendants(
            person_id, snapshot, DescendantQueryOptions(max_generations=clamp_generations(max_generations))
        )
    )


def get_descendants_by_generation(
    person_id: str,
    snapshot: GraphSnapshot,
    options: DescendantQueryOptions | None = None,
) -> dict[int, list[Person]]:
    grouped: dict[int, list[Person]] = {}
    for result in find_descendants(person_id, snapshot, options):
        grouped.setdefault(result.generation, []).append(result.person)
    return grouped


def get_all_relatives(
    person_id: str,
    snapshot: GraphSnapshot,
    ancestor_generations: int | None = None,
    descendant_generations: int | None = None,
) -> AllRelatives:
    """Combine an ancestor query and a descendant query for one person."""
    return AllRelatives(
        ancestors=find_ancestors(
            person_id, snapshot, AncestorQueryOptions(max_generations=clamp_generations(ancestor_generations))
        ),
        descendants=find_descendants(
            person_id, snapshot, DescendantQueryOptions(max_generations=clamp_generations(descendant_generations))
        ),
    )
