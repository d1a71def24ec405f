"""Basics: strings, functions, lists, a generic wrapper and optional values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the text."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number times itself."""
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Every value doubled."""
    return [value * 2 for value in values]


def vec_map(values: Iterable[int]) -> list[int]:
    """Every value doubled, computed by mapping."""
    return list(map(lambda value: value * 2, values))


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for hours past 24."""
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T