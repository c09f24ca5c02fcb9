"""Error presentation utilities.

Centralized error formatting and exit code mapping for discovery failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from imgver.core.errors import ErrorCode
from imgver.output.console import Style
from imgver.versions.errors import (
    DiscoveryError,
    NoVersionsFound,
    NoVersionsMatchCriteria,
    OverrideNotFound,
    UnknownProduct,
)

if TYPE_CHECKING:
    from imgver.output.console import ConsoleProtocol

__all__ = ["print_discovery_error", "discovery_error_exit_code"]


def print_discovery_error(error: DiscoveryError, console: ConsoleProtocol) -> None:
    """Print a discovery error with an actionable hint where there is one."""
    match error:
        case UnknownProduct(name=name, available=available):
            console.error(f"Unknown product '{name}'")
            if available:
                console.print(f"Available: {', '.join(available)}", Style.DIM)
        case NoVersionsFound(image=image, reason=reason):
            console.error(f"No valid versions found for {image}: {reason}")
        case NoVersionsMatchCriteria(image=image, policy=policy, majors_found=majors):
            console.error(f"No versions match criteria for {image} ({policy.describe()})")
            if majors:
                console.print(
                    f"hint: majors published: {', '.join(str(m) for m in majors)}", Style.DIM
                )
        case OverrideNotFound(spec=spec, reason=reason):
            console.error(f"Cannot resolve version '{spec}': {reason}")


def discovery_error_exit_code(error: DiscoveryError) -> int:
    """Get the process exit code for a discovery error."""
    match error:
        case UnknownProduct():
            return int(ErrorCode.USER_ERROR)
        case NoVersionsFound():
            return int(ErrorCode.NO_VERSIONS_FOUND)
        case NoVersionsMatchCriteria():
            return int(ErrorCode.NO_VERSIONS_MATCH)
        case OverrideNotFound():
            return int(ErrorCode.OVERRIDE_NOT_FOUND)
