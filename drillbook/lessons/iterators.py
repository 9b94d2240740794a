"""Iterator exercises: capitalising words, exact division, factorials and counting."""

from __future__ import annotations

import enum
from typing import Iterable, Mapping, Sequence

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U64_MAX = 2**64 - 1

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Return the text with its first character in upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join the results into one string."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce an exact integer result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError, ZeroDivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide a by b when a is evenly divisible by b; raise DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    quotient = a // b
    if not I32_MIN <= quotient <= I32_MAX:
        raise OverflowError("attempt to divide with overflow")
    return quotient


def _divide_all(numbers: Sequence[int], divisor: int) -> list[int | DivisionError]:
    results: list[int | DivisionError] = []
    for number in numbers:
        try:
            results.append(divide(number, divisor))
        except DivisionError as error:
            results.append(error)
    return results


def result_with_list() -> list[int]:
    """Divide the sample numbers by 27; raise at the first failing division."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers by 27, keeping each outcome, value or error."""
    return _divide_all(_NUMBERS, _DIVISOR)


def factorial(num: int) -> int:
    """Return num!; the result must fit in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, num + 1):
        result *= factor
        if result > U64_MAX:
            raise OverflowError("factorial does not fit in a 64-bit unsigned integer")
    return result


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across all maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)