"""Option exercises."""

from __future__ import annotations

LAST_HOUR = 23
BEDTIME = 22
PIECES = 5


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for an invalid hour."""
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day > LAST_HOUR:
        return None
    return PIECES if time_of_day < BEDTIME else 0