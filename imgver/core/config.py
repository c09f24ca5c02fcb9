"""Typed loading of the version policy configuration.

The configuration is a small file under ``.github/`` with top-level policy
keys and an optional ``images`` table. TOML (``version-config.toml``) and YAML
(``version-config.yml`` / ``.yaml``) are both read; the file suffix picks the
parser:

    max_major_versions = 3
    elasticsearch_min_major_version = 7

    [images]
    mysearch = "docker.io/example/mysearch"

A missing or broken file is never fatal: callers that only need the policy use
``load_config_or_default`` and get the defaults.
"""

from __future__ import annotations

import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from imgver.versions.policy import DEFAULT_MAX_MAJOR_VERSIONS, RetentionPolicy

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "VersionConfig",
    "find_config_path",
    "get_config_value",
    "load_config",
    "load_config_or_default",
]


DEFAULT_CONFIG_PATH = Path(".github") / "version-config.toml"

# Searched in order when no path is given.
CONFIG_CANDIDATES = (
    DEFAULT_CONFIG_PATH,
    Path(".github") / "version-config.yml",
    Path(".github") / "version-config.yaml",
)

_YAML_SUFFIXES = frozenset({".yml", ".yaml"})


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _empty_images() -> dict[str, str]:
    return {}


def _empty_min_majors() -> dict[str, int]:
    return {}


@dataclass(frozen=True, slots=True)
class VersionConfig:
    """Policy knobs and extra product images."""

    max_major_versions: int = DEFAULT_MAX_MAJOR_VERSIONS
    min_major_versions: dict[str, int] = field(default_factory=_empty_min_majors)
    images: dict[str, str] = field(default_factory=_empty_images)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> VersionConfig:
        """Create VersionConfig from a mapping (parsed TOML or YAML).

        Values of the wrong type or out of range are ignored.
        """
        max_major = get_int(data, "max_major_versions")
        if max_major is None or max_major < 1:
            max_major = DEFAULT_MAX_MAJOR_VERSIONS

        min_majors: dict[str, int] = {}
        for key in data:
            if not key.endswith(_MIN_MAJOR_SUFFIX):
                continue
            product = key.removesuffix(_MIN_MAJOR_SUFFIX)
            value = get_int(data, key)
            if product and value is not None and value >= 0:
                min_majors[product] = value

        images_table: StrDict = get_table(data, "images") or {}
        images: dict[str, str] = {}
        for name in images_table:
            image = get_str(images_table, name)
            if image:
                images[name] = image

        return cls(max_major_versions=max_major, min_major_versions=min_majors, images=images)

    def policy_for(self, product: str) -> RetentionPolicy:
        return RetentionPolicy(
            max_major_versions=self.max_major_versions,
            min_major_version=self.min_major_versions.get(product),
        )


_MIN_MAJOR_SUFFIX = "_min_major_version"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def _parse_yaml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a YAML file, handling read and parse errors."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            data_obj: object = yaml.safe_load(handle)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"Config path is a directory: {path}", path=path))
    except yaml.YAMLError as e:
        return Err(ConfigError(f"Invalid YAML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    if data_obj is None:
        return Ok({})
    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a YAML mapping", path=path))
    return Ok(data)


def _parse_file(path: Path) -> Result[StrDict, ConfigError]:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return _parse_yaml(path)
    return _parse_toml(path)


def find_config_path(base: Path | None = None) -> Path:
    """First existing config candidate under ``base`` (cwd by default).

    Falls back to the TOML default when none exists.
    """
    root = base or Path()
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if path.is_file():
            return path
    return root / DEFAULT_CONFIG_PATH


def get_config_value(path: Path, key: str, default: object = None) -> object:
    """Return a top-level scalar from the config file, or ``default``.

    Missing files, unreadable files, invalid syntax and absent keys all yield
    the default; tables are not scalars and also yield the default.
    """
    result = _parse_file(path)
    if isinstance(result, Err):
        return default
    value = result.value.get(key)
    if value is None or isinstance(value, (dict, list)):
        return default
    return value


def load_config(path: Path) -> Result[VersionConfig, ConfigError]:
    """Load and parse configuration from a TOML or YAML file.

    Args:
        path: Path to the version config file

    Returns:
        Ok(VersionConfig) on success, Err(ConfigError) on failure
    """
    result = _parse_file(path)
    if isinstance(result, Err):
        return result
    return Ok(VersionConfig.from_dict(result.value))


def load_config_or_default(
    path: Path,
    on_error: Callable[[ConfigError], None] | None = None,
) -> VersionConfig:
    """Load config from file, or return the defaults if it can't be loaded.

    ``on_error`` is told why the defaults were used.
    """
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    if on_error is not None:
        on_error(result.error)
    return VersionConfig()
