"""Shared and owned data: thread sums, cons lists, clone-on-write and counted handles."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")

PLANETS = (
    "Mercury",
    "Venus",
    "Earth",
    "Mars",
    "Jupiter",
    "Saturn",
    "Uranus",
    "Neptune",
)


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers n with n % workers == offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def total(offset: int) -> int:
        return sum(number for number in shared if number % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(total, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; the empty list is None."""

    value: int
    next: "Cons | None" = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a cons list holding 1 and 2."""
    return Cons(1, Cons(2, None))


class Cow:
    """Borrowed data that is copied the first time it has to be changed."""

    def __init__(self, data: Sequence[int], *, owned: bool = False):
        if owned and not isinstance(data, list):
            data = list(data)
        self._data: Sequence[int] = data
        self._owned = owned

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def value(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """Return mutable data, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        assert isinstance(self._data, list)
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only when needed."""
    for index, value in enumerate(tuple(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


class _Cell(Generic[T]):
    def __init__(self, value: T):
        self.value = value
        self.count = 1


class Shared(Generic[T]):
    """A handle to a value shared by several owners, with a strong count."""

    def __init__(self, value: T):
        self._cell: _Cell[T] = _Cell(value)
        self._alive = True

    def _check(self) -> None:
        if not self._alive:
            raise RuntimeError("handle has already been dropped")

    @property
    def value(self) -> T:
        self._check()
        return self._cell.value

    def clone(self) -> "Shared[T]":
        """Return another handle to the same value."""
        self._check()
        other: Shared[T] = Shared.__new__(Shared)
        other._cell = self._cell
        other._alive = True
        self._cell.count += 1
        return other

    def drop(self) -> None:
        """Release this handle."""
        self._check()
        self._alive = False
        self._cell.count -= 1

    def strong_count(self) -> int:
        """Number of live handles to the value."""
        return self._cell.count


@dataclass
class Planet:
    """A planet revolving around a shared sun."""

    name: str
    sun: Shared[Any]

    def __post_init__(self) -> None:
        if self.name not in PLANETS:
            raise ValueError(f"unknown planet: {self.name!r}")

    def details(self) -> str:
        line = f"Hi from {self.name}!"
        print(line)
        return line