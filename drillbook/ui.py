"""Coloured status lines printed to the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, style: str) -> str:
    prefix = fallback if no_emoji() else symbol
    line = f"{prefix} {message}"
    Console(highlight=False, soft_wrap=True).print(Text(line, style=style))
    return line


def warn(message: str) -> str:
    """Print a red warning line and return the text that was printed."""
    return _emit("⚠️ ", "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return the text that was printed."""
    return _emit("✅", "✓", message, "green")