"""Load a family tree export into a GraphSnapshot.

The tree file is JSON with two arrays, using either snake_case or the
camelCase keys of the application's export:

    {
      "people": [{"id": "p1", "firstName": "John", "lastName": "Doe",
                  "gender": "MALE", "dateOfBirth": "1930-05-01",
                  "isLiving": false}],
      "relationships": [{"personId": "p2", "relatedPersonId": "p1",
                         "type": "PARENT"}]
    }
"""
from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import TreeFileError
from .logging import get_logger
from .models import Gender, Person
from .snapshot import GraphSnapshot

logger = get_logger(__name__)


class PersonRecord(BaseModel):
    """Stored person row."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    gender: Gender | None = None
    birth_date: date | None = Field(default=None, alias="dateOfBirth")
    death_date: date | None = Field(default=None, alias="dateOfPassing")
    is_living: bool | None = Field(default=None, alias="isLiving")
    photo_url: str | None = Field(default=None, alias="photoUrl")

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Gender | None:
        return Gender.parse(value)

    @field_validator("birth_date", "death_date", mode="before")
    @classmethod
    def _date_part(cls, value: Any) -> Any:
        # Exports may carry full timestamps
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value

    def to_person(self) -> Person:
        return Person(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            birth_date=self.birth_date,
            death_date=self.death_date,
            is_living=self.is_living,
            photo_url=self.photo_url,
        )


class RelationshipRecord(BaseModel):
    """Stored relationship row."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    person_id: str = Field(alias="personId")
    related_person_id: str = Field(alias="relatedPersonId")
    type: str


class TreeFile(BaseModel):
    people: list[PersonRecord] = Field(default_factory=list)
    relationships: list[RelationshipRecord] = Field(default_factory=list)


def snapshot_from_dict(data: dict[str, Any]) -> GraphSnapshot:
    """Validate a parsed tree document and build its snapshot.

    Raises:
        ValidationError: Document does not match the tree file layout
        InvalidRelationshipRecord: A relationship row has an unknown type
    """
    tree = TreeFile.model_validate(data)
    return GraphSnapshot.from_records(
        people=[record.to_person() for record in tree.people],
        records=[record.model_dump() for record in tree.relationships],
    )


def load_snapshot(path: Path | str) -> GraphSnapshot:
    """Read a JSON tree file from disk.

    Raises:
        TreeFileError: File is missing or unreadable, not JSON, or not a tree document
        InvalidRelationshipRecord: A relationship row has an unknown type
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise TreeFileError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise TreeFileError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e
    except UnicodeDecodeError as e:
        raise TreeFileError(str(path), f"not UTF-8 text: {e.reason}") from e
    except OSError as e:
        raise TreeFileError(str(path), f"cannot read file: {e.strerror or e}") from e

    if not isinstance(data, dict):
        raise TreeFileError(str(path), "expected a JSON object with 'people' and 'relationships'")

    try:
        snapshot = snapshot_from_dict(data)
    except ValidationError as e:
        raise TreeFileError(str(path), f"{e.error_count()} invalid record(s): {e.errors()[0]['msg']}") from e

    logger.info("tree.loaded", path=str(path), **snapshot.stats())
    return snapshot
