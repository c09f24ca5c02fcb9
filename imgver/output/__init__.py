"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    QuietConsole,
    RichConsole,
    Style,
)

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "QuietConsole",
    "RichConsole",
    "Style",
]
