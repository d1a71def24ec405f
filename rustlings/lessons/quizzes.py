"""Quizzes: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def calculate_price_of_apples(apple_num: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    return apple_num * 2 if apple_num <= 40 else apple_num


class Command(Enum):
    """A command without arguments for the transformer."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(text: str, command: Command | Append) -> str:
    match command:
        case Command.UPPERCASE:
            return text.upper()
        case Command.TRIM:
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(pairs: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in pairs]


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A report card holding a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student_age must be between 0 and 255")

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )