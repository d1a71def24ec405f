"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: optional sign, ASCII digits, nothing else."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of the typed quantity: five per item plus a fee of one."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the items if affordable and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A PositiveNonzeroInteger could not be created."""


class NegativeError(CreationError):
    """The value was negative."""

    def __init__(self, message: str = "number is negative") -> None:
        super().__init__(message)


class ZeroError(CreationError):
    """The value was zero."""

    def __init__(self, message: str = "number is zero") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger.

    `cause` is either the integer parse error or a CreationError.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and require it to be positive and non-zero."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err