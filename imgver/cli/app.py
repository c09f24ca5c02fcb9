from __future__ import annotations

import typer

from imgver import __version__
from imgver.cli.commands.discover import discover
from imgver.cli.commands.products import products


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(discover)
app.command()(products)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Discover container image versions to build."""


def main() -> None:
    app()
