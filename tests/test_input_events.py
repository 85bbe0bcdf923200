import dataclasses
import string

import pytest

from oilpool.input_events import (
    Click,
    Drag,
    Hover,
    KeyCode,
    KeyPress,
    KeyRelease,
    MouseButton,
    Scroll,
    ViewportId,
)
from oilpool.input_state import Modifiers


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Space", KeyCode.SPACE),
        ("Enter", KeyCode.ENTER),
        ("Escape", KeyCode.ESCAPE),
        ("Backspace", KeyCode.BACKSPACE),
        ("Tab", KeyCode.TAB),
        ("KeyA", KeyCode.A),
        ("KeyZ", KeyCode.Z),
        ("Digit0", KeyCode.NUM0),
        ("Digit9", KeyCode.NUM9),
        ("F1", KeyCode.F1),
        ("F12", KeyCode.F12),
        ("ArrowLeft", KeyCode.LEFT),
        ("ArrowRight", KeyCode.RIGHT),
        ("ArrowUp", KeyCode.UP),
        ("ArrowDown", KeyCode.DOWN),
    ],
)
def test_from_name_known_keys(name, expected):
    assert KeyCode.from_name(name) is expected


@pytest.mark.parametrize("name", ["ShiftLeft", "F13", "Numpad1", "", "keya"])
def test_from_name_unknown_is_other(name):
    assert KeyCode.from_name(name) is KeyCode.OTHER


def test_every_letter_maps_to_its_own_code():
    codes = [KeyCode.from_name(f"Key{c}") for c in string.ascii_uppercase]
    assert [code.value for code in codes] == list(string.ascii_uppercase)


def test_every_key_code_except_other_is_reachable():
    names = (
        ["Space", "Enter", "Escape", "Backspace", "Tab"]
        + [f"Key{c}" for c in string.ascii_uppercase]
        + [f"Digit{d}" for d in range(10)]
        + [f"F{n}" for n in range(1, 13)]
        + ["ArrowLeft", "ArrowRight", "ArrowUp", "ArrowDown"]
    )
    reached = {KeyCode.from_name(n) for n in names}
    assert reached == set(KeyCode) - {KeyCode.OTHER}


def test_viewport_id_equality_and_hash():
    assert ViewportId(0) == ViewportId(0)
    assert ViewportId(0) != ViewportId(1)
    assert len({ViewportId(3), ViewportId(3)}) == 1


def test_click_defaults_to_no_viewport():
    click = Click(MouseButton.LEFT, (1.0, 2.0))
    assert click.viewport is None
    assert click == Click(MouseButton.LEFT, (1.0, 2.0), None)


def test_events_compare_by_value():
    drag = Drag(MouseButton.RIGHT, (0.0, 0.0), (5.0, 5.0), (1.0, 1.0))
    assert drag == Drag(MouseButton.RIGHT, (0.0, 0.0), (5.0, 5.0), (1.0, 1.0))
    assert Hover((1.0, 1.0), ViewportId(2)) != Hover((1.0, 1.0), None)
    assert Scroll((0.0, 20.0), (3.0, 4.0)).delta == (0.0, 20.0)


def test_key_events():
    press = KeyPress(KeyCode.A, Modifiers(ctrl=True))
    assert press.modifiers.ctrl is True
    assert KeyPress(KeyCode.A).modifiers == Modifiers()
    assert KeyRelease(KeyCode.ESCAPE).key is KeyCode.ESCAPE


def test_events_are_immutable():
    hover = Hover((0.0, 0.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        hover.pos = (1.0, 1.0)
    assert hover.pos == (0.0, 0.0)
    assert hover == Hover((0.0, 0.0))