"""Hash map exercises: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from drillbook.lessons.errors import parse_int

U8_MAX = 255


class Fruit(enum.Enum):
    """Kinds of fruit that may be in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and at least five fruits."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind that is not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > U8_MAX:
        raise OverflowError("goal count does not fit in an 8-bit integer")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of 'team_1,team_2,goals_1,goals_2'."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = parse_int(fields[2], 0, U8_MAX)
        team_2_score = parse_int(fields[3], 0, U8_MAX)
        team_1 = scores.setdefault(team_1_name, Team(team_1_name))
        team_1.goals_scored = _add_goals(team_1.goals_scored, team_1_score)
        team_1.goals_conceded = _add_goals(team_1.goals_conceded, team_2_score)
        team_2 = scores.setdefault(team_2_name, Team(team_2_name))
        team_2.goals_scored = _add_goals(team_2.goals_scored, team_2_score)
        team_2.goals_conceded = _add_goals(team_2.goals_conceded, team_1_score)
    return scores