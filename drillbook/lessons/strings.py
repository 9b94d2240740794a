"""String exercises: favourite colours, trimming, composing and replacing."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colour words."""
    return attempt in COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the text."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ' world!' to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every 'cars' in the text with 'balloons'."""
    return text.replace("cars", "balloons")