"""Shared family tree fixtures.

The Durham family used across the suite:

    george (M) + helen (F)
    ├── frank (M) + ruth (F)
    │   ├── david (M) + emma (F)
    │   │   ├── kid "Jack" (M)
    │   │   │   └── baby (gender unknown)
    │   │   └── amy (F)
    │   └── susan (F) + tom (M)
    │       └── lucy (F)
    │           └── mia (F)
    └── clara (F) + walter (M)
        └── nora (F)
            └── owen (M)

    stranger: no relationships at all
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from kinship_engine import Gender, GraphSnapshot, Person

M, F = Gender.MALE, Gender.FEMALE


def person(
    person_id: str,
    first_name: str,
    gender: Gender | None = None,
    is_living: bool | None = None,
    last_name: str = "Durham",
) -> Person:
    return Person(
        id=person_id,
        first_name=first_name,
        last_name=last_name,
        gender=gender,
        is_living=is_living,
    )


DURHAM_PEOPLE = [
    person("george", "George", M, False),
    person("helen", "Helen", F, False),
    person("frank", "Frank", M, False),
    person("ruth", "Ruth", F, False, last_name="Baker"),
    person("clara", "Clara", F, False),
    person("walter", "Walter", M, False, last_name="Price"),
    person("david", "David", M, False),
    person("emma", "Emma", F, True, last_name="Stone"),
    person("susan", "Susan", F, False),
    person("tom", "Tom", M, True, last_name="Hill"),
    person("nora", "Nora", F, True, last_name="Price"),
    person("kid", "Jack", M, True),
    person("amy", "Amy", F, True),
    person("lucy", "Lucy", F, True, last_name="Hill"),
    person("owen", "Owen", M, True, last_name="Price"),
    person("baby", "Baby", None, True),
    person("mia", "Mia", F, None, last_name="Hill"),
    person("stranger", "Sam", None, True, last_name="Nobody"),
]

DURHAM_PARENT_CHILD = [
    ("george", "frank"),
    ("helen", "frank"),
    ("george", "clara"),
    ("helen", "clara"),
    ("frank", "david"),
    ("ruth", "david"),
    ("frank", "susan"),
    ("ruth", "susan"),
    ("clara", "nora"),
    ("walter", "nora"),
    ("david", "kid"),
    ("emma", "kid"),
    ("david", "amy"),
    ("emma", "amy"),
    ("susan", "lucy"),
    ("tom", "lucy"),
    ("nora", "owen"),
    ("kid", "baby"),
    ("lucy", "mia"),
]

DURHAM_SPOUSES = [
    ("george", "helen"),
    ("frank", "ruth"),
    ("clara", "walter"),
    ("david", "emma"),
    ("susan", "tom"),
]


@pytest.fixture
def family() -> GraphSnapshot:
    """The Durham family snapshot."""
    return GraphSnapshot.from_edges(DURHAM_PEOPLE, DURHAM_PARENT_CHILD, DURHAM_SPOUSES)


@pytest.fixture
def cyclic() -> GraphSnapshot:
    """Corrupt data: a and b are each other's parent, c hangs off b."""
    return GraphSnapshot.from_edges(
        [person("a", "Ann", F), person("b", "Bob", M), person("c", "Cal", M)],
        [("a", "b"), ("b", "a"), ("b", "c")],
    )


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    """The Durham family written as a camelCase JSON export."""
    people = [
        {
            "id": p.id,
            "firstName": p.first_name,
            "lastName": p.last_name,
            "gender": p.gender.value.upper() if p.gender else None,
            "isLiving": p.is_living,
        }
        for p in DURHAM_PEOPLE
    ]
    relationships = [
        {"personId": child, "relatedPersonId": parent, "type": "PARENT"}
        for parent, child in DURHAM_PARENT_CHILD
    ]
    relationships += [
        {"personId": a, "relatedPersonId": b, "type": "SPOUSE"}
        for a, b in DURHAM_SPOUSES
    ]

    path = tmp_path / "durham.json"
    path.write_text(json.dumps({"people": people, "relationships": relationships}))
    return path
