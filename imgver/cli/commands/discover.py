from __future__ import annotations

from pathlib import Path

import typer

from imgver.cli.context import build_context
from imgver.core.result import Err
from imgver.output.errors import discovery_error_exit_code, print_discovery_error
from imgver.registry.tags import CraneTagSource, FileTagSource, TagSource
from imgver.services.discover import DiscoverRequest, DiscoverService
from imgver.versions.matrix import format_matrix
from imgver.versions.overrides import parse_override_list


def discover(
    product: str = typer.Argument(..., help="Product to discover (e.g. elasticsearch, opensearch)"),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Version config file (default: .github/version-config.toml)",
    ),
    versions: str | None = typer.Option(
        None,
        "--versions",
        help="Comma-separated versions to build instead of discovering (8.15.3 or 8.15)",
    ),
    tags_file: Path | None = typer.Option(
        None,
        "--tags-file",
        help="Read tags from a file ('-' for stdin) instead of querying the registry",
    ),
    max_major_versions: int | None = typer.Option(
        None,
        "--max-major-versions",
        min=1,
        help="Override max_major_versions from the config",
    ),
    min_major_version: int | None = typer.Option(
        None,
        "--min-major-version",
        min=0,
        help="Override <product>_min_major_version from the config",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors on stderr"),
) -> None:
    """Print the build matrix JSON for PRODUCT on stdout."""
    ctx = build_context(config_path=config, quiet=quiet)

    tags: TagSource = FileTagSource(tags_file) if tags_file is not None else CraneTagSource()
    service = DiscoverService(config=ctx.config, tags=tags, console=ctx.console)
    request = DiscoverRequest(
        product=product,
        overrides=parse_override_list(versions),
        max_major_versions=max_major_versions,
        min_major_version=min_major_version,
    )

    result = service.run(request)
    if isinstance(result, Err):
        print_discovery_error(result.error, ctx.console)
        raise typer.Exit(code=discovery_error_exit_code(result.error))

    typer.echo(format_matrix(result.value))
