"""Enums: messages and the state they change."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_u8(value: int, name: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, "x")
        _check_u8(self.y, "y")


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to the given RGB components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, "red")
        _check_u8(self.green, "green")
        _check_u8(self.blue, "blue")


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask to quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """The state changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False
    message: str = ""

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        self.message = text

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")