"""Conditions: picking the bigger number, fizz words and animal habitats."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")