from __future__ import annotations

import json
from collections.abc import Sequence

from imgver.versions.semver import Version

__all__ = ["to_matrix", "format_matrix"]


def to_matrix(selection: Sequence[Version]) -> dict[str, list[str]]:
    """Build-matrix structure consumed by CI fan-out (one job per entry)."""
    return {"version": [str(v) for v in selection]}


def format_matrix(selection: Sequence[Version]) -> str:
    return json.dumps(to_matrix(selection), separators=(",", ":"))
