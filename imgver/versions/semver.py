from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["MajorMinor", "Version", "parse_major_minor", "parse_version"]


# At most 18 digits per component; longer groups are not versions.
_NUM = r"([0-9]{1,18})"
_VERSION_RE = re.compile(rf"{_NUM}\.{_NUM}\.{_NUM}")
_MAJOR_MINOR_RE = re.compile(rf"{_NUM}\.{_NUM}")


@dataclass(frozen=True, slots=True, order=True)
class MajorMinor:
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


@dataclass(frozen=True, slots=True, order=True)
class Version:
    major: int
    minor: int
    patch: int

    @property
    def key(self) -> MajorMinor:
        return MajorMinor(self.major, self.minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(tag: str) -> Version | None:
    """Parse a strict ``major.minor.patch`` tag.

    Anything else (pre-release suffixes, a ``v`` prefix, two or four
    components, non-ASCII digits, components over 18 digits) is not a
    version and yields None.
    """
    m = _VERSION_RE.fullmatch(tag)
    if m is None:
        return None
    return Version(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def parse_major_minor(text: str) -> MajorMinor | None:
    m = _MAJOR_MINOR_RE.fullmatch(text)
    if m is None:
        return None
    return MajorMinor(int(m.group(1)), int(m.group(2)))
