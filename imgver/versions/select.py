"""Version selection: from raw registry tags to the versions worth building.

The pipeline runs strictly forward:

    tags -> parse_tags -> latest_patches -> retain_majors -> sorted selection

Every step is a pure function of its inputs; ``select_versions`` chains them
and turns the two empty outcomes into distinct errors.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from imgver.core.result import Err, Ok, Result
from imgver.versions.errors import NoVersionsFound, NoVersionsMatchCriteria
from imgver.versions.policy import RetentionPolicy
from imgver.versions.semver import MajorMinor, Version, parse_version

__all__ = [
    "distinct_majors",
    "latest_patches",
    "parse_tags",
    "retain_majors",
    "select_versions",
]


def parse_tags(tags: Iterable[str]) -> list[Version]:
    """Keep the tags that are stable releases, in input order.

    Surrounding whitespace is stripped (tag listings are line oriented).
    Duplicates are kept; grouping collapses them.
    """
    versions: list[Version] = []
    for tag in tags:
        version = parse_version(tag.strip())
        if version is not None:
            versions.append(version)
    return versions


def latest_patches(
    versions: Iterable[Version],
    *,
    only: MajorMinor | None = None,
) -> dict[MajorMinor, Version]:
    """Map each major.minor to its greatest patch.

    Args:
        versions: Parsed versions, any order.
        only: Restrict the result to a single major.minor group.
    """
    latest: dict[MajorMinor, Version] = {}
    for version in versions:
        key = version.key
        if only is not None and key != only:
            continue
        current = latest.get(key)
        if current is None or version.patch > current.patch:
            latest[key] = version
    return latest


def distinct_majors(versions: Iterable[Version]) -> list[int]:
    """Distinct major numbers, highest first."""
    return sorted({v.major for v in versions}, reverse=True)


def retain_majors(latest: Mapping[MajorMinor, Version], policy: RetentionPolicy) -> list[Version]:
    """Apply the retention policy to the per-group latest versions.

    The minimum-major bound is applied first, so an excluded major never
    takes one of the ``max_major_versions`` slots.
    """
    candidates = list(latest.values())
    if policy.min_major_version is not None:
        candidates = [v for v in candidates if v.major >= policy.min_major_version]

    kept = set(distinct_majors(candidates)[: policy.max_major_versions])
    return [v for v in candidates if v.major in kept]


def select_versions(
    tags: Iterable[str],
    policy: RetentionPolicy,
    *,
    image: str = "",
) -> Result[tuple[Version, ...], NoVersionsFound | NoVersionsMatchCriteria]:
    """Compute the build selection for a tag list.

    Returns:
        Ok with versions sorted descending, one per retained major.minor;
        Err(NoVersionsFound) when no tag is a stable release;
        Err(NoVersionsMatchCriteria) when the policy leaves nothing.
    """
    tag_list = list(tags)
    if not tag_list:
        return Err(NoVersionsFound(image=image, reason="tag source returned no tags"))

    versions = parse_tags(tag_list)
    if not versions:
        return Err(
            NoVersionsFound(
                image=image,
                reason=f"none of the {len(tag_list)} tag(s) is a stable major.minor.patch release",
            )
        )

    latest = latest_patches(versions)
    retained = retain_majors(latest, policy)
    if not retained:
        return Err(
            NoVersionsMatchCriteria(
                image=image,
                policy=policy,
                majors_found=tuple(distinct_majors(latest.values())),
            )
        )

    return Ok(tuple(sorted(retained, reverse=True)))
