"""Pedigree traversal facade over a graph snapshot.

Bundles every kinship query behind one object bound to a snapshot:
- Ancestor/descendant traversal (with generation and lineage)
- Common ancestor search and kinship description
- Cousin search and cousin degree
- Relationship path finding and naming

Each query is logged with its result size and elapsed time.
"""
from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, TypeVar

from . import ancestors, common_ancestor, cousins, descendants, path_finder
from .logging import get_logger
from .models import (
    AllRelatives,
    AncestorQueryOptions,
    AncestorResult,
    CommonAncestorResult,
    CousinDegree,
    CousinResult,
    DescendantQueryOptions,
    DescendantResult,
    KinshipResult,
    Person,
    RelationshipPath,
    clamp_generations,
)
from .snapshot import GraphSnapshot

logger = get_logger(__name__)

T = TypeVar("T")


def _result_size(result: Any) -> int:
    if result is None:
        return 0
    if isinstance(result, (list, dict)):
        return len(result)
    if isinstance(result, AllRelatives):
        return result.total_count
    return 1


class PedigreeTraversal:
    """Genealogical query engine bound to one immutable snapshot.

    Example:
        >>> traversal = PedigreeTraversal(snapshot)
        >>> for ancestor in traversal.get_ancestors("kid", max_generations=4):
        ...     print(ancestor.generation, ancestor.person.full_name)
    """

    def __init__(self, snapshot: GraphSnapshot) -> None:
        """Initialize traversal engine.

        Args:
            snapshot: Family graph shared by every query of this instance
        """
        self.snapshot = snapshot

    def _timed(self, query: str, run: Callable[[], T], **context: Any) -> T:
        start_time = time.time()
        result = run()
        query_time = (time.time() - start_time) * 1000
        logger.debug(
            "kinship.query",
            query=query,
            found=_result_size(result),
            query_time_ms=round(query_time, 3),
            **context,
        )
        return result

    # ─────────────────────────────────────────
    # Ancestors / descendants
    # ─────────────────────────────────────────

    def get_ancestors(
        self,
        person_id: str,
        max_generations: int | None = None,
        lineage: str = "all",
    ) -> list[AncestorResult]:
        options = AncestorQueryOptions(max_generations=clamp_generations(max_generations), lineage=lineage)
        return self._timed(
            "ancestors",
            lambda: ancestors.find_ancestors(person_id, self.snapshot, options),
            person_id=person_id,
        )

    def get_ancestors_at_generation(self, person_id: str, generation: int) -> list[Person]:
        return self._timed(
            "ancestors_at_generation",
            lambda: ancestors.get_ancestors_at_generation(person_id, generation, self.snapshot),
            person_id=person_id,
            generation=generation,
        )

    def count_ancestors(self, person_id: str, max_generations: int | None = None) -> int:
        return ancestors.count_ancestors(person_id, self.snapshot, max_generations)

    def get_ancestors_by_generation(
        self,
        person_id: str,
        max_generations: int | None = None,
        lineage: str = "all",
    ) -> dict[int, list[Person]]:
        options = AncestorQueryOptions(max_generations=clamp_generations(max_generations), lineage=lineage)
        return ancestors.get_ancestors_by_generation(person_id, self.snapshot, options)

    def get_descendants(
        self,
        person_id: str,
        max_generations: int | None = None,
        include_living: bool = False,
        include_deceased: bool = False,
    ) -> list[DescendantResult]:
        options = DescendantQueryOptions(
            max_generations=clamp_generations(max_generations),
            include_living=include_living,
            include_deceased=include_deceased,
        )
        return self._timed(
            "descendants",
            lambda: descendants.find_descendants(person_id, self.snapshot, options),
            person_id=person_id,
        )

    def get_descendants_at_generation(self, person_id: str, generation: int) -> list[Person]:
        return self._timed(
            "descendants_at_generation",
            lambda: descendants.get_descendants_at_generation(person_id, generation, self.snapshot),
            person_id=person_id,
            generation=generation,
        )

    def count_descendants(self, person_id: str, max_generations: int | None = None) -> int:
        return descendants.count_descendants(person_id, self.snapshot, max_generations)

    def get_descendants_by_generation(
        self,
        person_id: str,
        max_generations: int | None = None,
    ) -> dict[int, list[Person]]:
        options = DescendantQueryOptions(max_generations=clamp_generations(max_generations))
        return descendants.get_descendants_by_generation(person_id, self.snapshot, options)

    def get_all_relatives(
        self,
        person_id: str,
        ancestor_generations: int | None = None,
        descendant_generations: int | None = None,
    ) -> AllRelatives:
        return self._timed(
            "all_relatives",
            lambda: descendants.get_all_relatives(
                person_id, self.snapshot, ancestor_generations, descendant_generations
            ),
            person_id=person_id,
        )

    # ─────────────────────────────────────────
    # Common ancestors / kinship
    # ─────────────────────────────────────────

    def find_common_ancestor(self, person1_id: str, person2_id: str) -> CommonAncestorResult | None:
        return self._timed(
            "common_ancestor",
            lambda: common_ancestor.find_common_ancestor(person1_id, person2_id, self.snapshot),
            person1_id=person1_id,
            person2_id=person2_id,
        )

    def find_all_common_ancestors(self, person1_id: str, person2_id: str) -> list[CommonAncestorResult]:
        return self._timed(
            "all_common_ancestors",
            lambda: common_ancestor.find_all_common_ancestors(person1_id, person2_id, self.snapshot),
            person1_id=person1_id,
            person2_id=person2_id,
        )

    def describe_kinship(self, person_a_id: str, person_b_id: str) -> KinshipResult | None:
        return self._timed(
            "kinship",
            lambda: common_ancestor.describe_kinship(person_a_id, person_b_id, self.snapshot),
            person_a_id=person_a_id,
            person_b_id=person_b_id,
        )

    # ─────────────────────────────────────────
    # Cousins / paths
    # ─────────────────────────────────────────

    def find_cousins(self, person_id: str, degree: int = 1) -> list[CousinResult]:
        return self._timed(
            "cousins",
            lambda: cousins.find_cousins(person_id, degree, self.snapshot),
            person_id=person_id,
            degree=degree,
        )

    def calculate_cousin_degree(self, person1_id: str, person2_id: str) -> CousinDegree | None:
        return cousins.calculate_cousin_degree(person1_id, person2_id, self.snapshot)

    def find_relationship_path(
        self,
        person1_id: str,
        person2_id: str,
        gender_neutral: bool | None = None,
    ) -> RelationshipPath | None:
        return self._timed(
            "relationship_path",
            lambda: path_finder.find_relationship_path(
                person1_id, person2_id, self.snapshot, gender_neutral=gender_neutral
            ),
            person1_id=person1_id,
            person2_id=person2_id,
        )
