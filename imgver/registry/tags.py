"""Tag sources: where the raw tag list of an upstream image comes from.

- TagSource: Protocol (injectable for tests)
- CraneTagSource: lists tags with crane (local binary, or the crane image via docker)
- FileTagSource: newline-separated tags from a file or stdin
- StaticTagSource: in-memory tags
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from imgver.core.result import Err, Ok, Result
from imgver.platform.process import ProcessError, run, which

__all__ = [
    "CRANE_IMAGE",
    "CraneTagSource",
    "FileTagSource",
    "StaticTagSource",
    "TagSource",
    "TagSourceError",
    "split_tags",
]


CRANE_VERSION = "v0.19.1"
CRANE_IMAGE = f"gcr.io/go-containerregistry/crane:{CRANE_VERSION}"
LIST_TIMEOUT_SECONDS = 300.0


@dataclass(frozen=True, slots=True)
class TagSourceError:
    image: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} ({self.image})"


@runtime_checkable
class TagSource(Protocol):
    def list_tags(self, image: str) -> Result[tuple[str, ...], TagSourceError]:
        """Return every tag published for ``image`` (unordered, unfiltered)."""
        ...


def split_tags(text: str) -> tuple[str, ...]:
    """One tag per line; blank lines dropped."""
    return tuple(line.strip() for line in text.splitlines() if line.strip())


Runner = Callable[..., Result[str, ProcessError]]


class CraneTagSource:
    """List tags with ``crane ls``.

    Uses a ``crane`` binary from PATH when available, otherwise runs the
    pinned crane image through docker.
    """

    def __init__(
        self,
        *,
        crane_image: str = CRANE_IMAGE,
        timeout: float = LIST_TIMEOUT_SECONDS,
        runner: Runner = run,
        locate: Callable[[str], str | None] = which,
    ) -> None:
        self.crane_image = crane_image
        self.timeout = timeout
        self._run = runner
        self._which = locate

    def command(self, image: str) -> list[str]:
        crane = self._which("crane")
        if crane:
            return [crane, "ls", image]
        return ["docker", "run", "--rm", self.crane_image, "ls", image]

    def list_tags(self, image: str) -> Result[tuple[str, ...], TagSourceError]:
        result = self._run(self.command(image), timeout=self.timeout)
        if isinstance(result, Err):
            message = f"failed to list tags: {result.error.detail}"
            return Err(TagSourceError(image=image, message=message))
        return Ok(split_tags(result.value))


class FileTagSource:
    """Read tags from a file, or from stdin when the path is ``-``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def list_tags(self, image: str) -> Result[tuple[str, ...], TagSourceError]:
        try:
            if str(self.path) == "-":
                text = sys.stdin.read()
            else:
                text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            message = f"cannot read tags from {self.path}: {e}"
            return Err(TagSourceError(image=image, message=message))
        return Ok(split_tags(text))


class StaticTagSource:
    """Fixed tag list; counts queries so tests can assert on them."""

    def __init__(self, tags: Iterable[str] = (), *, error: str | None = None) -> None:
        self.tags = tuple(tags)
        self.error = error
        self.calls: list[str] = []

    def list_tags(self, image: str) -> Result[tuple[str, ...], TagSourceError]:
        self.calls.append(image)
        if self.error is not None:
            return Err(TagSourceError(image=image, message=self.error))
        return Ok(self.tags)
