from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_MAJOR_VERSIONS", "RetentionPolicy"]


DEFAULT_MAX_MAJOR_VERSIONS = 3


@dataclass(frozen=True, slots=True)
class RetentionPolicy:
    """Which major lines are eligible for building.

    Attributes:
        max_major_versions: Number of most recent majors to keep.
        min_major_version: Majors below this are never built (None: no bound).
    """

    max_major_versions: int = DEFAULT_MAX_MAJOR_VERSIONS
    min_major_version: int | None = None

    def __post_init__(self) -> None:
        if self.max_major_versions < 1:
            raise ValueError(f"max_major_versions must be >= 1, got {self.max_major_versions}")
        if self.min_major_version is not None and self.min_major_version < 0:
            raise ValueError(f"min_major_version must be >= 0, got {self.min_major_version}")

    def describe(self) -> str:
        text = f"max {self.max_major_versions} major(s)"
        if self.min_major_version is not None:
            text += f", major >= {self.min_major_version}"
        return text
