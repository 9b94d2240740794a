"""Quiz exercises: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable

BULK_THRESHOLD = 40
REGULAR_PRICE = 2
BULK_PRICE = 1


def calculate_price_of_apples(apples: int) -> int:
    """Price of an order: 2 each, or 1 each for orders above 40 apples."""
    if apples <= BULK_THRESHOLD:
        return apples * REGULAR_PRICE
    return apples * BULK_PRICE


class _CommandKind(enum.Enum):
    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """An action applied to a string by the transformer."""

    kind: _CommandKind
    count: int = 0

    @classmethod
    def uppercase(cls) -> "Command":
        return cls(_CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> "Command":
        return cls(_CommandKind.TRIM)

    @classmethod
    def append(cls, count: int) -> "Command":
        if count < 0:
            raise ValueError("append count must not be negative")
        return cls(_CommandKind.APPEND, count)

    def apply(self, text: str) -> str:
        """Return the text with this command applied."""
        if self.kind is _CommandKind.UPPERCASE:
            return text.upper()
        if self.kind is _CommandKind.TRIM:
            return text.strip()
        return text + "bar" * self.count


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [command.apply(text) for text, command in items]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and math.isfinite(grade) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_format_grade(self.grade)}"
        )