"""Enum exercises: messages and a state machine that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to quit."""


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change the current colour."""

    color: tuple[int, int, int]


Message = Union[Quit, Move, Echo, ChangeColor]


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.change_color(color)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case Echo(text=text):
                self.echo(text)
            case _:
                raise TypeError(f"unknown message: {message!r}")