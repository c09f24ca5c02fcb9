from __future__ import annotations

from pathlib import Path

import pytest

import imgver.cli.context as context_mod
from imgver.cli.context import build_context
from imgver.core.config import DEFAULT_CONFIG_PATH, VersionConfig
from imgver.output.console import MockConsole


@pytest.fixture
def console(monkeypatch: pytest.MonkeyPatch) -> MockConsole:
    mock = MockConsole()
    monkeypatch.setattr(context_mod, "RichConsole", lambda: mock)
    return mock


class TestBuildContext:
    def test_broken_explicit_config_warns_and_uses_defaults(
        self, tmp_path: Path, console: MockConsole
    ) -> None:
        path = tmp_path / "version-config.toml"
        path.write_text("max_major_versions = [\n", encoding="utf-8")

        ctx = build_context(config_path=path)

        assert ctx.config == VersionConfig()
        assert ctx.config_path == path
        assert console.find("using defaults")

    def test_missing_default_config_is_silent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, console: MockConsole
    ) -> None:
        monkeypatch.chdir(tmp_path)

        ctx = build_context()

        assert ctx.config == VersionConfig()
        assert ctx.config_path == DEFAULT_CONFIG_PATH
        assert console.outputs == []

    def test_loaded_config_is_announced(self, tmp_path: Path, console: MockConsole) -> None:
        path = tmp_path / "version-config.yml"
        path.write_text("max_major_versions: 2\n", encoding="utf-8")

        ctx = build_context(config_path=path)

        assert ctx.config.max_major_versions == 2
        assert console.find(f"config: {path}")
        assert not console.find("using defaults")
