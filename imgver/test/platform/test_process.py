"""Tests for imgver.platform.process module."""

from __future__ import annotations

import sys

import pytest

from imgver.core.result import Err, Ok
from imgver.platform.process import ProcessError, run, which


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("crane", "ls"), returncode=1, stdout="", stderr="")
        assert str(error) == "crane ls failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("docker", "run", "--rm", "crane", "ls", "x"),
            returncode=125,
            stdout="",
            stderr="",
        )
        assert str(error) == "docker run --rm ... failed (exit 125)"

    def test_detail_uses_last_stderr_line(self) -> None:
        error = ProcessError(("crane",), 1, "", "warning\nError: denied\n\n")
        assert error.detail == "Error: denied"

    def test_detail_without_stderr(self) -> None:
        error = ProcessError(("crane",), 2, "", "")
        assert error.detail == "crane failed (exit 2)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self) -> None:
        result = run([sys.executable, "-c", "print('8.1.0')"])

        assert isinstance(result, Ok)
        assert result.value.strip() == "8.1.0"

    def test_failure_returns_error(self) -> None:
        result = run([sys.executable, "-c", "import sys; sys.stderr.write('nope'); sys.exit(42)"])

        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert "nope" in result.error.stderr

    def test_command_not_found(self) -> None:
        result = run(["nonexistent_command_12345"])

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert len(result.error.stderr) > 0

    def test_timeout(self) -> None:
        result = run([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)

        assert isinstance(result, Err)
        assert result.error.returncode == -1
        assert "timed out" in result.error.stderr


def test_which_missing_command() -> None:
    assert which("nonexistent_command_12345") is None
