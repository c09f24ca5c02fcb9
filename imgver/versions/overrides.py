"""Manual version overrides.

An override names either an exact version (``8.15.3``, used verbatim) or a
``major.minor`` line (``8.15``) that is resolved to its latest published
patch. Overrides bypass the retention policy entirely.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from imgver.core.result import Err, Ok, Result
from imgver.versions.errors import NoVersionsFound, OverrideNotFound
from imgver.versions.select import latest_patches, parse_tags
from imgver.versions.semver import Version, parse_major_minor, parse_version

__all__ = ["TagFetcher", "parse_override_list", "resolve_override", "resolve_overrides"]


TagFetcher = Callable[[], Result[Sequence[str], NoVersionsFound]]


def parse_override_list(text: str | None) -> tuple[str, ...]:
    """Split a comma-separated override list, dropping blank entries."""
    if not text:
        return ()
    return tuple(part.strip() for part in text.split(",") if part.strip())


def resolve_override(spec: str, versions: Iterable[Version]) -> Result[Version, OverrideNotFound]:
    """Resolve one override against already parsed versions.

    A full version is used without checking that it was published. Like every
    emitted version it is rendered canonically, so ``08.15.3`` becomes
    ``8.15.3``.
    """
    full = parse_version(spec)
    if full is not None:
        return Ok(full)

    key = parse_major_minor(spec)
    if key is None:
        return Err(
            OverrideNotFound(spec=spec, reason="expected major.minor.patch or major.minor")
        )

    match = latest_patches(versions, only=key).get(key)
    if match is None:
        return Err(OverrideNotFound(spec=spec, reason=f"no stable {key}.x release published"))
    return Ok(match)


def _is_short_form(spec: str) -> bool:
    return parse_version(spec) is None and parse_major_minor(spec) is not None


def resolve_overrides(
    specs: Sequence[str],
    fetch_tags: TagFetcher,
    *,
    image: str = "",
) -> Result[tuple[Version, ...], NoVersionsFound | OverrideNotFound]:
    """Resolve a list of overrides into a build selection.

    ``fetch_tags`` is called at most once, and only when a short-form spec
    needs the published tags. The result is de-duplicated and sorted
    descending.
    """
    published: list[Version] | None = None
    resolved: set[Version] = set()

    for spec in specs:
        if published is None and _is_short_form(spec):
            fetched = fetch_tags()
            if isinstance(fetched, Err):
                return fetched
            published = parse_tags(fetched.value)
            if not published:
                reason = (
                    "tag source returned no tags"
                    if not fetched.value
                    else "no stable major.minor.patch release among published tags"
                )
                return Err(NoVersionsFound(image=image, reason=reason))

        result = resolve_override(spec, published or [])
        if isinstance(result, Err):
            return result
        resolved.add(result.value)

    return Ok(tuple(sorted(resolved, reverse=True)))
