from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from imgver.core.config import ConfigError, VersionConfig, find_config_path, load_config_or_default
from imgver.output.console import ConsoleProtocol, QuietConsole, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: VersionConfig
    config_path: Path
    console: ConsoleProtocol


def build_context(*, config_path: Path | None = None, quiet: bool = False) -> CLIContext:
    console: ConsoleProtocol = RichConsole()
    if quiet:
        console = QuietConsole(console)

    path = config_path or find_config_path()

    def _report(error: ConfigError) -> None:
        # Missing or broken config is not fatal: run with the defaults.
        if config_path is not None or path.exists():
            console.warning(f"config: {error.message}; using defaults")

    config = load_config_or_default(path, on_error=_report)
    if path.is_file():
        console.print(f"config: {path}", Style.DIM)

    return CLIContext(config=config, config_path=path, console=console)
