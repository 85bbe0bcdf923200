"""Semantic input events produced from raw input state changes."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum

from oilpool.input_state import Modifiers, Position


class MouseButton(Enum):
    """Mouse button identifier."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"


@dataclass(frozen=True)
class ViewportId:
    """Identifier of a viewport used for hit testing."""

    value: int


class KeyCode(Enum):
    """Simplified key code."""

    SPACE = "Space"
    ENTER = "Enter"
    ESCAPE = "Escape"
    BACKSPACE = "Backspace"
    TAB = "Tab"

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    NUM0 = "Num0"
    NUM1 = "Num1"
    NUM2 = "Num2"
    NUM3 = "Num3"
    NUM4 = "Num4"
    NUM5 = "Num5"
    NUM6 = "Num6"
    NUM7 = "Num7"
    NUM8 = "Num8"
    NUM9 = "Num9"

    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"

    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"

    OTHER = "Other"

    @classmethod
    def from_name(cls, name: str) -> KeyCode:
        """Map a physical key name such as ``"KeyA"`` or ``"ArrowUp"`` to a key code.

        Unknown names map to ``OTHER``.
        """
        return _PHYSICAL_NAMES.get(name, cls.OTHER)


_PHYSICAL_NAMES: dict[str, KeyCode] = {
    "Space": KeyCode.SPACE,
    "Enter": KeyCode.ENTER,
    "Escape": KeyCode.ESCAPE,
    "Backspace": KeyCode.BACKSPACE,
    "Tab": KeyCode.TAB,
    "ArrowLeft": KeyCode.LEFT,
    "ArrowRight": KeyCode.RIGHT,
    "ArrowUp": KeyCode.UP,
    "ArrowDown": KeyCode.DOWN,
    **{f"Key{letter}": KeyCode[letter] for letter in string.ascii_uppercase},
    **{f"Digit{digit}": KeyCode[f"NUM{digit}"] for digit in range(10)},
    **{f"F{n}": KeyCode[f"F{n}"] for n in range(1, 13)},
}


@dataclass(frozen=True)
class Click:
    """Mouse click at a logical screen position, with the viewport hit, if any."""

    button: MouseButton
    pos: Position
    viewport: ViewportId | None = None


@dataclass(frozen=True)
class Drag:
    """Mouse drag: start position, current position and movement since last frame."""

    button: MouseButton
    start: Position
    current: Position
    delta: Position


@dataclass(frozen=True)
class Hover:
    """Mouse hovering at a position, with the viewport hovered, if any."""

    pos: Position
    viewport: ViewportId | None = None


@dataclass(frozen=True)
class Scroll:
    """Mouse scroll delta and where it happened."""

    delta: Position
    pos: Position


@dataclass(frozen=True)
class KeyPress:
    """A key was pressed with the given modifiers."""

    key: KeyCode
    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True)
class KeyRelease:
    """A key was released."""

    key: KeyCode


InputEvent = Click | Drag | Hover | Scroll | KeyPress | KeyRelease