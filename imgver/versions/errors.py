from __future__ import annotations

from dataclasses import dataclass

from imgver.versions.policy import RetentionPolicy


@dataclass(frozen=True, slots=True)
class UnknownProduct:
    name: str
    available: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoVersionsFound:
    image: str
    reason: str


@dataclass(frozen=True, slots=True)
class NoVersionsMatchCriteria:
    image: str
    policy: RetentionPolicy
    majors_found: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class OverrideNotFound:
    spec: str
    reason: str


DiscoveryError = UnknownProduct | NoVersionsFound | NoVersionsMatchCriteria | OverrideNotFound
