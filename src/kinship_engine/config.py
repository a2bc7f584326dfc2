"""Environment-driven configuration for the kinship engine.

Environment Variables:
    KINSHIP_LOG_LEVEL: structlog filtering level (default INFO)
    KINSHIP_GENDER_NEUTRAL_LABELS: use neutral terms ("parent", "sibling")
        instead of the female-coded fallback when a target's gender is
        unknown (default false)
    KINSHIP_DEFAULT_MAX_GENERATIONS: generation cutoff applied by the CLI
        when no --generations option is given; 0 means unlimited (default 0)
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _i(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except Exception:
        return default


def _b(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _level(name: str, default: str) -> str:
    value = os.getenv(name, default).upper()
    return value if value in _LEVELS else default


@dataclass(frozen=True)
class KinshipConfig:
    log_level: str = _level("KINSHIP_LOG_LEVEL", "INFO")
    gender_neutral_labels: bool = _b("KINSHIP_GENDER_NEUTRAL_LABELS", False)

    # 0 = unlimited
    default_max_generations: int = _i("KINSHIP_DEFAULT_MAX_GENERATIONS", 0)

    @classmethod
    def from_env(cls) -> KinshipConfig:
        """Re-read the environment, e.g. after a .env file was loaded."""
        return cls(
            log_level=_level("KINSHIP_LOG_LEVEL", "INFO"),
            gender_neutral_labels=_b("KINSHIP_GENDER_NEUTRAL_LABELS", False),
            default_max_generations=_i("KINSHIP_DEFAULT_MAX_GENERATIONS", 0),
        )

    @property
    def max_generations(self) -> int | None:
        """Generation cutoff as accepted by the query options."""
        if self.default_max_generations <= 0:
            return None
        return self.default_max_generations


CONFIG = KinshipConfig()
