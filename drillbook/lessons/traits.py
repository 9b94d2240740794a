"""Trait exercises: appending 'Bar', shared licensing info and combined behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Return the value with 'Bar' appended."""
    raise TypeError(f"cannot append 'Bar' to {type(value).__name__}")


@append_bar.register
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _append_bar_list(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that shares one piece of licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Behaviour that answers True by default."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Other behaviour that answers True by default."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """A type with both behaviours."""


class OtherStruct(SomeTrait, OtherTrait):
    """Another type with both behaviours."""


def some_func(item: Any) -> bool:
    """Whether both behaviours of the item answer True."""
    return item.some_function() and item.other_function()