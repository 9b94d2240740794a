"""Error handling exercises: nametags, token costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_ASCII_DIGITS = "0123456789"


class NametagError(ValueError):
    """A nametag could not be generated."""


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; an empty name is rejected."""
    if not name:
        raise NametagError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


class ParseIntError(ValueError):
    """Text could not be parsed as an integer of the requested range."""


def parse_int(text: str, minimum: int = I32_MIN, maximum: int = I32_MAX) -> int:
    """Parse a decimal integer that must lie within [minimum, maximum].

    A leading '+' is accepted; a leading '-' only when negative values are allowed.
    """
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    negative = False
    digits = text
    if text[0] == "+" or (text[0] == "-" and minimum < 0):
        if len(text) == 1:
            raise ParseIntError("invalid digit found in string")
        negative = text[0] == "-"
        digits = text[1:]
    value = 0
    for char in digits:
        if char not in _ASCII_DIGITS:
            raise ParseIntError("invalid digit found in string")
        digit = ord(char) - ord("0")
        value = value * 10 - digit if negative else value * 10 + digit
        if value > maximum:
            raise ParseIntError("number too large to fit in target type")
        if value < minimum:
            raise ParseIntError("number too small to fit in target type")
    return value


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1."""
    quantity = parse_int(item_quantity)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not I32_MIN <= cost <= I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the typed quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationErrorKind(enum.Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive nonzero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> "PositiveNonzeroInteger":
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive nonzero integer failed; `source` holds the cause."""

    def __init__(self, source: CreationError | ParseIntError):
        super().__init__(str(source))
        self.source = source


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and require it to be positive and nonzero."""
    try:
        value = parse_int(text, I64_MIN, I64_MAX)
    except ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc