"""Ancestor queries with generation and lineage tracking.

Traversal is breadth-first over an explicit worklist, so a person reachable
through several lines (pedigree collapse) is recorded at the shortest
generation. Each ancestor is recorded once; reaching it again only merges
its lineage.
"""
from __future__ import annotations

from collections import deque

from .logging import get_logger
from .models import (
    AncestorQueryOptions,
    AncestorResult,
    Lineage,
    LineageFilter,
    Person,
    clamp_generations,
)
from .snapshot import GraphSnapshot

logger = get_logger(__name__)


def find_ancestors(
    person_id: str,
    snapshot: GraphSnapshot,
    options: AncestorQueryOptions | None = None,
) -> list[AncestorResult]:
    """Find all ancestors of a person up to an optional generation limit.

    Lineage comes from the ancestor's own gender when first discovered:
    male is paternal, female maternal, unknown both.

    Args:
        person_id: Person to start from
        snapshot: Family graph to traverse
        options: Generation limit and lineage filter

    Returns:
        Ancestors sorted by generation (parents first)

    Example:
        >>> find_ancestors("kid", snapshot, AncestorQueryOptions(max_generations=2))
    """
    options = options or AncestorQueryOptions()
    if person_id not in snapshot:
        return []

    results: dict[str, AncestorResult] = {}
    visited: set[str] = {person_id}
    queue: deque[tuple[str, int]] = deque([(person_id, 0)])

    while queue:
        current_id, generation = queue.popleft()

        if options.max_generations is not None and generation >= options.max_generations:
            continue

        for parent_id in snapshot.parents_of(current_id):
            parent = snapshot.person(parent_id)
            if parent is None:
                logger.debug("ancestors.dangling_parent", person_id=current_id, parent_id=parent_id)
                continue

            lineage = Lineage.for_gender(parent.gender)
            existing = results.get(parent_id)
            if existing is not None:
                existing.lineage = existing.lineage.merge(lineage)
                continue
            if parent_id in visited:
                # Start person reached again through cyclic data
                continue

            visited.add(parent_id)
            results[parent_id] = AncestorResult(
                person=parent,
                generation=generation + 1,
                lineage=lineage,
            )
            queue.append((parent_id, generation + 1))

    ancestors = list(results.values())

    if options.lineage != LineageFilter.ALL:
        wanted = Lineage(options.lineage.value)
        ancestors = [a for a in ancestors if a.lineage in (wanted, Lineage.BOTH)]

    ancestors.sort(key=lambda a: a.generation)
    return ancestors


def get_ancestors_at_generation(
    person_id: str,
    generation: int,
    snapshot: GraphSnapshot,
) -> list[Person]:
    """Get the ancestors exactly ``generation`` steps up (2 = grandparents)."""
    if generation < 1:
        return []
    results = find_ancestors(
        person_id, snapshot, AncestorQueryOptions(max_generations=generation)
    )
    return [r.person for r in results if r.generation == generation]


def count_ancestors(
    person_id: str,
    snapshot: GraphSnapshot,
    max_generations: int | None = None,
) -> int:
    """Count unique ancestors up to an optional generation limit."""
    return len(
        find_ancestors(
            person_id, snapshot, AncestorQueryOptions(max_generations=clamp_generations(max_generations))
        )
    )


def get_ancestors_by_generation(
    person_id: str,
    snapshot: GraphSnapshot,
    options: AncestorQueryOptions | None = None,
) -> dict[int, list[Person]]:
    """Group ancestors by generation (1 = parents, 2 = grandparents, ...)."""
    grouped: dict[int, list[Person]] = {}
    for result in find_ancestors(person_id, snapshot, options):
        grouped.setdefault(result.generation, []).append(result.person)
    return grouped
