from __future__ import annotations

import pytest

from imgver.versions.semver import MajorMinor, Version, parse_major_minor, parse_version


def test_parse_version() -> None:
    assert parse_version("8.11.3") == Version(8, 11, 3)
    assert parse_version("0.0.0") == Version(0, 0, 0)


@pytest.mark.parametrize(
    "tag",
    [
        "8.0.0-rc1",
        "8.0.0-SNAPSHOT",
        "8.0.0-beta1",
        "8.0.0-alpha.2",
        "v8.0.0",
        "8.0",
        "8.0.0.1",
        "latest",
        "8.0.0\n",
        " 8.0.0",
        "8.0.x",
        "８.0.0",
        "",
    ],
)
def test_parse_version_rejects_non_stable_tags(tag: str) -> None:
    assert parse_version(tag) is None


def test_parse_version_normalizes_leading_zeros() -> None:
    assert parse_version("08.01.002") == Version(8, 1, 2)
    assert str(parse_version("08.01.002")) == "8.1.2"


def test_versions_order_numerically() -> None:
    assert Version(10, 0, 0) > Version(9, 0, 0)
    assert Version(7, 17, 5) > Version(7, 9, 20)
    assert sorted([Version(2, 10, 5), Version(2, 11, 0), Version(1, 3, 9)]) == [
        Version(1, 3, 9),
        Version(2, 10, 5),
        Version(2, 11, 0),
    ]


def test_version_key_and_str() -> None:
    version = Version(8, 11, 3)
    assert version.key == MajorMinor(8, 11)
    assert str(version) == "8.11.3"
    assert str(version.key) == "8.11"


def test_parse_major_minor() -> None:
    assert parse_major_minor("2.11") == MajorMinor(2, 11)
    assert parse_major_minor("2.11.0") is None
    assert parse_major_minor("2") is None
    assert parse_major_minor("2.x") is None


def test_version_is_frozen() -> None:
    version = Version(1, 2, 3)
    with pytest.raises(AttributeError):
        version.patch = 4  # type: ignore[misc]


def test_parse_version_rejects_oversized_components() -> None:
    huge = "1" * 5000
    assert parse_version(f"{huge}.0.0") is None
    assert parse_version(f"8.{huge}.0") is None
    assert parse_version("1" * 19 + ".0.0") is None
    assert parse_version("9" * 18 + ".0.0") == Version(int("9" * 18), 0, 0)
    assert parse_major_minor(f"{huge}.1") is None
