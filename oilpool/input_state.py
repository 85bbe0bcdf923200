"""Raw per-frame input state: mouse, keyboard and button edge tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Position = tuple[float, float]


class ButtonState(Enum):
    """Button press state with edge detection."""

    RELEASED = "Released"
    JUST_PRESSED = "JustPressed"
    PRESSED = "Pressed"
    JUST_RELEASED = "JustReleased"

    def advance(self) -> ButtonState:
        """Return the state for the next frame, turning edges into steady states."""
        if self is ButtonState.JUST_PRESSED:
            return ButtonState.PRESSED
        if self is ButtonState.JUST_RELEASED:
            return ButtonState.RELEASED
        return self

    def is_down(self) -> bool:
        """True while the button is held, including the frame it was pressed."""
        return self in (ButtonState.JUST_PRESSED, ButtonState.PRESSED)

    def is_just_pressed(self) -> bool:
        """True only on the frame the button went down."""
        return self is ButtonState.JUST_PRESSED

    def is_just_released(self) -> bool:
        """True only on the frame the button went up."""
        return self is ButtonState.JUST_RELEASED


@dataclass(frozen=True)
class Modifiers:
    """Keyboard modifier keys."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False


@dataclass
class KeyboardState:
    """Keyboard input state."""

    modifiers: Modifiers = field(default_factory=Modifiers)


@dataclass
class MouseButtons:
    """State of the three tracked mouse buttons."""

    left: ButtonState = ButtonState.RELEASED
    right: ButtonState = ButtonState.RELEASED
    middle: ButtonState = ButtonState.RELEASED


@dataclass
class MouseState:
    """Mouse input state.

    ``window_pos`` is in physical pixels, ``screen_pos`` in DPI-scaled
    logical pixels.
    """

    window_pos: Position | None = None
    screen_pos: Position | None = None
    buttons: MouseButtons = field(default_factory=MouseButtons)
    scroll_delta: Position = (0.0, 0.0)


@dataclass
class InputState:
    """Snapshot of raw input for a single frame."""

    mouse: MouseState = field(default_factory=MouseState)
    keyboard: KeyboardState = field(default_factory=KeyboardState)
    time: float = 0.0

    def advance_frame(self) -> None:
        """Advance all button states and clear per-frame values."""
        buttons = self.mouse.buttons
        buttons.left = buttons.left.advance()
        buttons.right = buttons.right.advance()
        buttons.middle = buttons.middle.advance()
        self.mouse.scroll_delta = (0.0, 0.0)