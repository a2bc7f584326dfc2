"""Relationship vocabulary and human-readable kinship wording.

Covers two concerns:
- The stored relationship types (blood, marriage, in-law, step) with
  gendered labels, inverses and coexistence rules
- Generation and cousin wording ("great-grandparent", "second cousin once
  removed") derived from generation distances
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class RelationshipType(str, Enum):
    """Relationship types stored between two people."""
    PARENT = "PARENT"
    CHILD = "CHILD"
    SPOUSE = "SPOUSE"
    SIBLING = "SIBLING"

    # In-law relationships
    PARENT_IN_LAW = "PARENT_IN_LAW"
    CHILD_IN_LAW = "CHILD_IN_LAW"
    SIBLING_IN_LAW = "SIBLING_IN_LAW"

    # Step relationships
    STEP_PARENT = "STEP_PARENT"
    STEP_CHILD = "STEP_CHILD"
    STEP_SIBLING = "STEP_SIBLING"


class RelationshipCategory(str, Enum):
    BLOOD = "blood"
    MARRIAGE = "marriage"
    INLAW = "inlaw"
    STEP = "step"


BLOOD_RELATIONSHIPS = (
    RelationshipType.PARENT,
    RelationshipType.CHILD,
    RelationshipType.SIBLING,
)
MARRIAGE_RELATIONSHIPS = (RelationshipType.SPOUSE,)
INLAW_RELATIONSHIPS = (
    RelationshipType.PARENT_IN_LAW,
    RelationshipType.CHILD_IN_LAW,
    RelationshipType.SIBLING_IN_LAW,
)
STEP_RELATIONSHIPS = (
    RelationshipType.STEP_PARENT,
    RelationshipType.STEP_CHILD,
    RelationshipType.STEP_SIBLING,
)

_NEUTRAL_LABELS = {
    RelationshipType.PARENT: "Parent",
    RelationshipType.CHILD: "Child",
    RelationshipType.SPOUSE: "Spouse",
    RelationshipType.SIBLING: "Sibling",
    RelationshipType.PARENT_IN_LAW: "Parent-in-law",
    RelationshipType.CHILD_IN_LAW: "Child-in-law",
    RelationshipType.SIBLING_IN_LAW: "Sibling-in-law",
    RelationshipType.STEP_PARENT: "Step-parent",
    RelationshipType.STEP_CHILD: "Step-child",
    RelationshipType.STEP_SIBLING: "Step-sibling",
}

_MALE_LABELS = {
    RelationshipType.PARENT: "Father",
    RelationshipType.CHILD: "Son",
    RelationshipType.SPOUSE: "Husband",
    RelationshipType.SIBLING: "Brother",
    RelationshipType.PARENT_IN_LAW: "Father-in-law",
    RelationshipType.CHILD_IN_LAW: "Son-in-law",
    RelationshipType.SIBLING_IN_LAW: "Brother-in-law",
    RelationshipType.STEP_PARENT: "Step-father",
    RelationshipType.STEP_CHILD: "Step-son",
    RelationshipType.STEP_SIBLING: "Step-brother",
}

_FEMALE_LABELS = {
    RelationshipType.PARENT: "Mother",
    RelationshipType.CHILD: "Daughter",
    RelationshipType.SPOUSE: "Wife",
    RelationshipType.SIBLING: "Sister",
    RelationshipType.PARENT_IN_LAW: "Mother-in-law",
    RelationshipType.CHILD_IN_LAW: "Daughter-in-law",
    RelationshipType.SIBLING_IN_LAW: "Sister-in-law",
    RelationshipType.STEP_PARENT: "Step-mother",
    RelationshipType.STEP_CHILD: "Step-daughter",
    RelationshipType.STEP_SIBLING: "Step-sister",
}

_INVERSES = {
    RelationshipType.PARENT: RelationshipType.CHILD,
    RelationshipType.CHILD: RelationshipType.PARENT,
    RelationshipType.SPOUSE: RelationshipType.SPOUSE,
    RelationshipType.SIBLING: RelationshipType.SIBLING,
    RelationshipType.PARENT_IN_LAW: RelationshipType.CHILD_IN_LAW,
    RelationshipType.CHILD_IN_LAW: RelationshipType.PARENT_IN_LAW,
    RelationshipType.SIBLING_IN_LAW: RelationshipType.SIBLING_IN_LAW,
    RelationshipType.STEP_PARENT: RelationshipType.STEP_CHILD,
    RelationshipType.STEP_CHILD: RelationshipType.STEP_PARENT,
    RelationshipType.STEP_SIBLING: RelationshipType.STEP_SIBLING,
}

# Pairs that cannot hold between the same two people at once
_CONFLICTING_PAIRS = (
    {RelationshipType.PARENT, RelationshipType.CHILD},
    {RelationshipType.STEP_PARENT, RelationshipType.STEP_CHILD},
    {RelationshipType.PARENT_IN_LAW, RelationshipType.CHILD_IN_LAW},
)

_ORDINALS = {
    1: "first",
    2: "second",
    3: "third",
    4: "fourth",
    5: "fifth",
    6: "sixth",
    7: "seventh",
    8: "eighth",
    9: "ninth",
    10: "tenth",
}


def relationship_category(rel_type: RelationshipType) -> RelationshipCategory:
    """Get the category of a relationship type."""
    if rel_type in MARRIAGE_RELATIONSHIPS:
        return RelationshipCategory.MARRIAGE
    if rel_type in INLAW_RELATIONSHIPS:
        return RelationshipCategory.INLAW
    if rel_type in STEP_RELATIONSHIPS:
        return RelationshipCategory.STEP
    return RelationshipCategory.BLOOD


def is_blood_relationship(rel_type: RelationshipType) -> bool:
    return rel_type in BLOOD_RELATIONSHIPS


def is_inlaw_relationship(rel_type: RelationshipType) -> bool:
    return rel_type in INLAW_RELATIONSHIPS


def is_step_relationship(rel_type: RelationshipType) -> bool:
    return rel_type in STEP_RELATIONSHIPS


def is_derived_relationship(rel_type: RelationshipType) -> bool:
    """In-law and step relationships are derived from marriages."""
    return is_inlaw_relationship(rel_type) or is_step_relationship(rel_type)


def _gender_key(gender: Any) -> str | None:
    if gender is None:
        return None
    text = str(getattr(gender, "value", gender)).strip().lower()
    if text in ("male", "m"):
        return "male"
    if text in ("female", "f"):
        return "female"
    return None


def relationship_label(rel_type: RelationshipType, gender: Any = None) -> str:
    """Human-readable label for a stored relationship type.

    Example:
        >>> relationship_label(RelationshipType.PARENT_IN_LAW)
        'Parent-in-law'
        >>> relationship_label(RelationshipType.PARENT_IN_LAW, "male")
        'Father-in-law'
    """
    key = _gender_key(gender)
    if key == "male":
        return _MALE_LABELS[rel_type]
    if key == "female":
        return _FEMALE_LABELS[rel_type]
    return _NEUTRAL_LABELS[rel_type]


def inverse_relationship(rel_type: RelationshipType) -> RelationshipType:
    return _INVERSES[rel_type]


def can_coexist(type1: RelationshipType, type2: RelationshipType) -> bool:
    """Check whether two relationship types may both link the same pair.

    Siblings can also be step-siblings in blended families, but nobody is
    both parent and child of the same person.
    """
    if type1 == type2:
        return False
    return not any({type1, type2} == pair for pair in _CONFLICTING_PAIRS)


def gendered_term(
    gender: Any,
    male: str,
    female: str,
    neutral: str,
    gender_neutral: bool = False,
) -> str:
    """Pick a gendered term for a relationship target.

    Unknown or "other" gender falls back to the female-coded term unless
    ``gender_neutral`` is set.
    """
    key = _gender_key(gender)
    if key == "male":
        return male
    if key == "female" or not gender_neutral:
        return female
    return neutral


def ancestor_label(generation: int) -> str:
    """Label for a direct ancestor ``generation`` steps up."""
    if generation == 1:
        return "parent"
    elif generation == 2:
        return "grandparent"
    return f"{'great-' * (generation - 2)}grandparent"


def descendant_label(generation: int) -> str:
    """Label for a direct descendant ``generation`` steps down."""
    if generation == 1:
        return "child"
    elif generation == 2:
        return "grandchild"
    return f"{'great-' * (generation - 2)}grandchild"


def ordinal(number: int) -> str:
    if number in _ORDINALS:
        return _ORDINALS[number]
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def cousin_label(degree: int, removal: int) -> str:
    """Standard wording for a cousin degree and removal.

    Example:
        >>> cousin_label(2, 1)
        'second cousin once removed'
    """
    base = f"{ordinal(degree)} cousin"
    if removal == 0:
        return base
    elif removal == 1:
        return f"{base} once removed"
    elif removal == 2:
        return f"{base} twice removed"
    return f"{base} {removal} times removed"


def kinship_label(generations_a: int, generations_b: int) -> str:
    """Describe person B relative to person A.

    Args:
        generations_a: Generations from A up to the common ancestor
        generations_b: Generations from B up to the common ancestor
    """
    if generations_a == 0 and generations_b == 0:
        return "self"
    elif generations_a == 0:
        return descendant_label(generations_b)
    elif generations_b == 0:
        return ancestor_label(generations_a)
    elif generations_a == 1 and generations_b == 1:
        return "sibling"
    elif generations_b == 1:
        # B is a sibling of one of A's ancestors
        return f"{'great-' * (generations_a - 2)}uncle/aunt"
    elif generations_a == 1:
        return f"{'great-' * (generations_b - 2)}nephew/niece"
    degree = min(generations_a, generations_b) - 1
    removal = abs(generations_a - generations_b)
    return cousin_label(degree, removal)
