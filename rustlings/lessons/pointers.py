"""Linked cons lists and a copy-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value and the rest of the list, None for the empty list."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single element."""
    return Cons(5)


class Cow:
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self.data = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def owning(cls, data: list[int]) -> Cow:
        return cls(data, owned=True)

    def to_mut(self) -> MutableSequence[int]:
        """The data in a form that may be changed, copying borrowed data first."""
        if not self.owned:
            self.data = list(self.data)
            self.owned = True
        return self.data  # type: ignore[return-value]

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if something changes."""
    for index, value in enumerate(tuple(cow.data)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow