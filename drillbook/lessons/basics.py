"""Basic exercises: sale prices, even numbers and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

EVEN_DISCOUNT = 10
ODD_DISCOUNT = 3


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Sale price: 10 off an even price, 3 off an odd one."""
    if is_even(price):
        return price - EVEN_DISCOUNT
    return price - ODD_DISCOUNT


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T