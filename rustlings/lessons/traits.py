"""Traits: appending "Bar" and shared licensing information."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()