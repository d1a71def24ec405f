"""Hash maps: fruit baskets and a table of football scores."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255
_UNSIGNED = re.compile(r"\+?[0-9]+")


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits."""
    return {
        "banana": 2,
        "banana1": 2,
        "bananab": 2,
        "bananda": 2,
    }


class Fruit(Enum):
    """The kinds of fruit that can go into the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_basket(basket: dict[Fruit, int]) -> None:
    """Add two of every fruit kind that is not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 2)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count too large: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    return [piece.removesuffix("\r") for piece in pieces]


def _add(scores: dict[str, Team], name: str, scored: int, conceded: int) -> None:
    team = scores.setdefault(name, Team(name))
    new_scored = team.goals_scored + scored
    new_conceded = team.goals_conceded + conceded
    if new_scored > _U8_MAX or new_conceded > _U8_MAX:
        raise OverflowError(f"goal totals for {name} do not fit in a byte")
    team.goals_scored = new_scored
    team.goals_conceded = new_conceded


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1 = _parse_goals(fields[2])
        score_2 = _parse_goals(fields[3])
        _add(scores, team_1, score_1, score_2)
        _add(scores, team_2, score_2, score_1)
    return scores