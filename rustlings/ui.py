"""Coloured status lines printed by the command-line interface."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> None:
    mark = fallback if no_emoji() else symbol
    line = Text.assemble((mark, colour), " ", (message, colour))
    Console(highlight=False, emoji=False).print(line, soft_wrap=True)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅", "✓", message, "green")