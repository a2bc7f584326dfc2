"""Errors raised at the boundary between stored records and the engine.

Traversal functions themselves never raise for unknown people, dangling
references or cyclic data; they degrade to empty results.
"""
from __future__ import annotations

from dataclasses import dataclass


class KinshipError(Exception):
    """Base class for kinship engine errors."""


@dataclass
class InvalidRelationshipRecord(KinshipError):
    """Raised when a stored relationship row cannot be mapped to an edge."""

    reason: str
    record: dict | None = None

    def __str__(self) -> str:  # pragma: no cover - human readable
        if self.record is not None:
            return f"{self.reason}: {self.record!r}"
        return self.reason


@dataclass
class TreeFileError(KinshipError):
    """Raised when a family tree file cannot be read or parsed."""

    path: str
    reason: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"{self.path}: {self.reason}"
