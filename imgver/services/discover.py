"""Discovery service: product -> tag source -> build selection.

Wires the pure selection logic to its collaborators (config, tag source,
console) and narrates progress. The service never prints the matrix itself;
the CLI owns stdout.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from imgver.core.config import VersionConfig
from imgver.core.result import Err, Ok, Result
from imgver.output.console import ConsoleProtocol, Style
from imgver.registry.products import resolve_image
from imgver.registry.tags import TagSource
from imgver.versions.errors import DiscoveryError, NoVersionsFound
from imgver.versions.overrides import resolve_overrides
from imgver.versions.policy import RetentionPolicy
from imgver.versions.select import distinct_majors, select_versions
from imgver.versions.semver import Version

__all__ = ["DiscoverRequest", "DiscoverService"]


@dataclass(frozen=True, slots=True)
class DiscoverRequest:
    product: str
    overrides: tuple[str, ...] = ()
    max_major_versions: int | None = None
    min_major_version: int | None = None


class DiscoverService:
    def __init__(self, *, config: VersionConfig, tags: TagSource, console: ConsoleProtocol) -> None:
        self._config = config
        self._tags = tags
        self._console = console

    def policy_for(self, request: DiscoverRequest) -> RetentionPolicy:
        """Config policy for the product, with per-run overrides applied."""
        base = self._config.policy_for(request.product)
        return RetentionPolicy(
            max_major_versions=request.max_major_versions or base.max_major_versions,
            min_major_version=(
                request.min_major_version
                if request.min_major_version is not None
                else base.min_major_version
            ),
        )

    def run(self, request: DiscoverRequest) -> Result[tuple[Version, ...], DiscoveryError]:
        image_result = resolve_image(request.product, self._config.images)
        if isinstance(image_result, Err):
            return image_result
        image = image_result.value

        if request.overrides:
            return self._resolve(request.overrides, image)
        return self._discover(request, image)

    def _fetch(self, image: str) -> Result[Sequence[str], NoVersionsFound]:
        result = self._tags.list_tags(image)
        if isinstance(result, Err):
            return Err(NoVersionsFound(image=image, reason=result.error.message))
        return Ok(result.value)

    def _discover(
        self, request: DiscoverRequest, image: str
    ) -> Result[tuple[Version, ...], DiscoveryError]:
        policy = self.policy_for(request)
        self._console.info(f"Discovering versions for {request.product} from {image}...")
        self._console.print(f"policy: {policy.describe()}", Style.DIM)

        fetched = self._fetch(image)
        if isinstance(fetched, Err):
            return fetched

        selected = select_versions(fetched.value, policy, image=image)
        if isinstance(selected, Err):
            return selected

        majors = distinct_majors(selected.value)
        self._console.print(
            f"Found {len(majors)} major version(s): {' '.join(str(m) for m in majors)}"
        )
        self._report(selected.value)
        return selected

    def _resolve(
        self, specs: tuple[str, ...], image: str
    ) -> Result[tuple[Version, ...], DiscoveryError]:
        self._console.info(f"Resolving requested versions: {', '.join(specs)}")

        resolved = resolve_overrides(specs, lambda: self._fetch(image), image=image)
        if isinstance(resolved, Err):
            return resolved

        self._report(resolved.value)
        return resolved

    def _report(self, selection: tuple[Version, ...]) -> None:
        self._console.success(f"Discovered {len(selection)} version(s) to build:")
        for version in selection:
            self._console.print(f"   - {version}")
