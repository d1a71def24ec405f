import pytest

from rustlings.lessons.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call():
    state = State(
        color=(0, 0, 0),
        position=Point(0, 0),
        has_quit=False,
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(x=10, y=15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert state.message == "Hello world!"


def test_default_state_has_not_quit():
    state = State()
    assert state.has_quit is False
    assert state.position == Point(0, 0)


def test_unknown_message_is_rejected():
    with pytest.raises(TypeError):
        State().process("jump")


def test_point_out_of_range():
    with pytest.raises(ValueError):
        Point(256, 0)


def test_change_color_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor(0, -1, 0)


def test_later_echo_replaces_earlier():
    state = State()
    state.process(Echo("first"))
    state.process(Echo("second"))
    assert state.message == "second"