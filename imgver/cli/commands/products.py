from __future__ import annotations

from pathlib import Path

import typer

from imgver.cli.context import build_context
from imgver.registry.products import known_images


def products(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Version config file (default: .github/version-config.toml)",
    ),
) -> None:
    """List known products, their images and retention policy."""
    ctx = build_context(config_path=config)

    for name, image in sorted(known_images(ctx.config.images).items()):
        policy = ctx.config.policy_for(name)
        typer.echo(f"{name}\t{image}\t{policy.describe()}")
