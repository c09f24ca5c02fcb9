from __future__ import annotations

import json

from imgver.versions.matrix import format_matrix, to_matrix
from imgver.versions.semver import Version


def test_to_matrix() -> None:
    selection = (Version(8, 11, 3), Version(7, 17, 5))
    assert to_matrix(selection) == {"version": ["8.11.3", "7.17.5"]}


def test_format_matrix_is_compact_json() -> None:
    text = format_matrix((Version(2, 11, 0), Version(2, 10, 5)))
    assert text == '{"version":["2.11.0","2.10.5"]}'
    assert json.loads(text) == {"version": ["2.11.0", "2.10.5"]}


def test_format_empty_matrix() -> None:
    assert format_matrix(()) == '{"version":[]}'
