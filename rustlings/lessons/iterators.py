"""Iterators: capitalising words, exact division, factorials and progress counts."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum, auto

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them without separators."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when a is a multiple of b; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    quotient = a // b
    if not _I32_MIN <= quotient <= _I32_MAX:
        raise OverflowError("quotient does not fit in a 32-bit integer")
    return quotient


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Every number divided by 27; a failed division raises."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Every number divided by 27, with an error in place of a failed division."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as err:
            results.append(err)
    return results


def factorial(num: int) -> int:
    """num! for an unsigned 64-bit result."""
    if num < 0:
        raise ValueError("factorial is only defined for non-negative numbers")
    result = math.factorial(num)
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(Enum):
    """How far an exercise has been worked through."""

    NONE = auto()
    SOME = auto()
    COMPLETE = auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a loop."""
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
    """Count entries with the given progress across maps using loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)