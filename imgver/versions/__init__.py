"""Pure version discovery and selection logic (no I/O)."""

from .errors import (
    DiscoveryError,
    NoVersionsFound,
    NoVersionsMatchCriteria,
    OverrideNotFound,
    UnknownProduct,
)
from .matrix import format_matrix, to_matrix
from .overrides import parse_override_list, resolve_override, resolve_overrides
from .policy import DEFAULT_MAX_MAJOR_VERSIONS, RetentionPolicy
from .select import latest_patches, parse_tags, retain_majors, select_versions
from .semver import MajorMinor, Version, parse_major_minor, parse_version

__all__ = [
    # errors
    "DiscoveryError",
    "NoVersionsFound",
    "NoVersionsMatchCriteria",
    "OverrideNotFound",
    "UnknownProduct",
    # matrix
    "format_matrix",
    "to_matrix",
    # overrides
    "parse_override_list",
    "resolve_override",
    "resolve_overrides",
    # policy
    "DEFAULT_MAX_MAJOR_VERSIONS",
    "RetentionPolicy",
    # select
    "latest_patches",
    "parse_tags",
    "retain_majors",
    "select_versions",
    # semver
    "MajorMinor",
    "Version",
    "parse_major_minor",
    "parse_version",
]
