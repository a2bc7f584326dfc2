"""Person, query option and result models for kinship traversal.

Provides the value types exchanged with the engine:
- Person records as supplied by the caller
- Ancestor/descendant results with generation (and lineage) tracking
- Common-ancestor, cousin and relationship-path results

Every result is built fresh per call; nothing is cached between calls.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .labels import ancestor_label, cousin_label, descendant_label


class Gender(str, Enum):
    """Recorded gender of a person."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> Gender | None:
        """Coerce stored values ("MALE", "f", "Female") to a Gender."""
        if value is None:
            return None
        if isinstance(value, Gender):
            return value
        text = str(value).strip().lower()
        if text in ("male", "m"):
            return cls.MALE
        if text in ("female", "f"):
            return cls.FEMALE
        if text in ("other", "o"):
            return cls.OTHER
        return None


class Lineage(str, Enum):
    """Side of the family an ancestor belongs to."""
    PATERNAL = "paternal"
    MATERNAL = "maternal"
    BOTH = "both"

    @classmethod
    def for_gender(cls, gender: Gender | None) -> Lineage:
        if gender is None:
            return cls.BOTH
        return cls.PATERNAL if gender == Gender.MALE else cls.MATERNAL

    def merge(self, other: Lineage) -> Lineage:
        """Combine two lineages seen for the same ancestor."""
        if self == other:
            return self
        return Lineage.BOTH


class LineageFilter(str, Enum):
    """Lineage restriction for ancestor queries."""
    PATERNAL = "paternal"
    MATERNAL = "maternal"
    ALL = "all"


class EdgeKind(str, Enum):
    """Edge kinds walked by the relationship path finder."""
    PARENT = "parent"  # step to one of the current person's parents
    CHILD = "child"  # step to one of the current person's children
    SPOUSE = "spouse"


@dataclass(frozen=True)
class Person:
    """A person as held in the caller's lookup."""
    id: str
    first_name: str = ""
    last_name: str = ""
    gender: Gender | None = None
    birth_date: date | None = None
    death_date: date | None = None
    is_living: bool | None = None
    photo_url: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "gender": self.gender.value if self.gender else None,
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "death_date": self.death_date.isoformat() if self.death_date else None,
            "is_living": self.is_living,
            "photo_url": self.photo_url,
        }


def clamp_generations(max_generations: int | None) -> int | None:
    """Map a raw generation cutoff onto the query options range.

    A negative cutoff reaches no generation, the same as 0.
    """
    if max_generations is None:
        return None
    return max(max_generations, 0)


class AncestorQueryOptions(BaseModel):
    """Options for ancestor traversal."""
    model_config = ConfigDict(frozen=True)

    max_generations: int | None = Field(default=None, ge=0)
    lineage: LineageFilter = LineageFilter.ALL


class DescendantQueryOptions(BaseModel):
    """Options for descendant traversal.

    ``include_living`` and ``include_deceased`` form a tri-state filter:
    only one of them set keeps that group, both or neither keep everyone.
    """
    model_config = ConfigDict(frozen=True)

    max_generations: int | None = Field(default=None, ge=0)
    include_living: bool = False
    include_deceased: bool = False


@dataclass
class AncestorResult:
    """Single ancestor with generation distance."""
    person: Person
    generation: int  # 1=parent, 2=grandparent, etc.
    lineage: Lineage

    @property
    def relationship_label(self) -> str:
        return ancestor_label(self.generation)

    def to_dict(self) -> dict[str, Any]:
        return {
            "person": self.person.to_dict(),
            "generation": self.generation,
            "lineage": self.lineage.value,
            "relationship_label": self.relationship_label,
        }


@dataclass
class DescendantResult:
    """Single descendant with generation distance."""
    person: Person
    generation: int  # 1=child, 2=grandchild, etc.

    @property
    def relationship_label(self) -> str:
        return descendant_label(self.generation)

    def to_dict(self) -> dict[str, Any]:
        return {
            "person": self.person.to_dict(),
            "generation": self.generation,
            "relationship_label": self.relationship_label,
        }


@dataclass
class AllRelatives:
    """Union of an ancestor query and a descendant query."""
    ancestors: list[AncestorResult] = field(default_factory=list)
    descendants: list[DescendantResult] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.ancestors) + len(self.descendants)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ancestors": [a.to_dict() for a in self.ancestors],
            "descendants": [d.to_dict() for d in self.descendants],
            "total_count": self.total_count,
        }


@dataclass
class CommonAncestorResult:
    """A shared ancestor and the generation distance from each person."""
    ancestor: Person
    distance1: int
    distance2: int

    @property
    def total_distance(self) -> int:
        return self.distance1 + self.distance2

    def to_dict(self) -> dict[str, Any]:
        return {
            "ancestor": self.ancestor.to_dict(),
            "distance1": self.distance1,
            "distance2": self.distance2,
        }


@dataclass(frozen=True)
class CousinDegree:
    """Cousin degree (1=first cousin) and removal (generation offset)."""
    degree: int
    removal: int

    @property
    def label(self) -> str:
        return cousin_label(self.degree, self.removal)


@dataclass
class CousinResult:
    """A cousin of the queried person."""
    person: Person
    degree: int
    removal: int

    @property
    def label(self) -> str:
        return cousin_label(self.degree, self.removal)

    def to_dict(self) -> dict[str, Any]:
        return {
            "person": self.person.to_dict(),
            "degree": self.degree,
            "removal": self.removal,
            "label": self.label,
        }


@dataclass
class RelationshipPath:
    """Shortest hop path between two people and its classification."""
    path: list[Person]
    edge_types: list[EdgeKind]
    relationship: str
    distance: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": [p.to_dict() for p in self.path],
            "edge_types": [e.value for e in self.edge_types],
            "relationship": self.relationship,
            "distance": self.distance,
        }


@dataclass
class KinshipResult:
    """Kinship between two people via their globally nearest common ancestor."""
    person_a: Person
    person_b: Person
    relationship: str  # e.g. "first cousin", "second cousin once removed"
    common_ancestor: Person | None = None
    generations_to_common_ancestor_a: int = 0
    generations_to_common_ancestor_b: int = 0

    @property
    def degree_of_relationship(self) -> int:
        """Sum of generations from each person to the common ancestor."""
        return self.generations_to_common_ancestor_a + self.generations_to_common_ancestor_b

    def to_dict(self) -> dict[str, Any]:
        return {
            "person_a": self.person_a.to_dict(),
            "person_b": self.person_b.to_dict(),
            "relationship": self.relationship,
            "common_ancestor": self.common_ancestor.to_dict() if self.common_ancestor else None,
            "generations_to_common_ancestor_a": self.generations_to_common_ancestor_a,
            "generations_to_common_ancestor_b": self.generations_to_common_ancestor_b,
        }
