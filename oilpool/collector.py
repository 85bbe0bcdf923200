"""Collection of raw window events into an InputState."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum

from oilpool.input_events import MouseButton
from oilpool.input_state import ButtonState, InputState, Modifiers, Position

LINE_SCROLL_PIXELS = 20.0


class ElementState(Enum):
    """Whether a button or key went down or up."""

    PRESSED = "Pressed"
    RELEASED = "Released"


@dataclass(frozen=True)
class CursorMoved:
    """Cursor moved to a position in physical window pixels."""

    position: Position


@dataclass(frozen=True)
class MouseInput:
    """A mouse button changed state; buttons other than the three tracked are ignored."""

    state: ElementState
    button: MouseButton | int


@dataclass(frozen=True)
class LineDelta:
    """Scroll amount in lines."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Scroll amount in pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseWheel:
    """Mouse wheel scrolled."""

    delta: LineDelta | PixelDelta


@dataclass(frozen=True)
class ModifiersChanged:
    """Modifier keys changed."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False


@dataclass(frozen=True)
class KeyboardInput:
    """A key changed state."""

    state: ElementState
    key: str = ""


WindowEvent = CursorMoved | MouseInput | MouseWheel | ModifiersChanged | KeyboardInput


class InputCollector:
    """Maintains an InputState from a stream of window events."""

    def __init__(self) -> None:
        self._state = InputState()
        self._scale_factor = 1.0

    @property
    def state(self) -> InputState:
        """The live input state."""
        return self._state

    def set_scale_factor(self, scale_factor: float) -> None:
        """Set the DPI scale factor used to derive logical screen positions."""
        self._scale_factor = scale_factor

    def handle_window_event(self, event: object) -> None:
        """Update the state from one window event; unknown events are ignored."""
        mouse = self._state.mouse
        match event:
            case CursorMoved(position=(x, y)):
                mouse.window_pos = (float(x), float(y))
                mouse.screen_pos = (x / self._scale_factor, y / self._scale_factor)
            case MouseInput(state=element_state, button=button):
                button_state = (
                    ButtonState.JUST_PRESSED
                    if element_state is ElementState.PRESSED
                    else ButtonState.JUST_RELEASED
                )
                match button:
                    case MouseButton.LEFT:
                        mouse.buttons.left = button_state
                    case MouseButton.RIGHT:
                        mouse.buttons.right = button_state
                    case MouseButton.MIDDLE:
                        mouse.buttons.middle = button_state
            case MouseWheel(delta=LineDelta(x=x, y=y)):
                mouse.scroll_delta = (x * LINE_SCROLL_PIXELS, y * LINE_SCROLL_PIXELS)
            case MouseWheel(delta=PixelDelta(x=x, y=y)):
                mouse.scroll_delta = (float(x), float(y))
            case ModifiersChanged(shift=shift, ctrl=ctrl, alt=alt, meta=meta):
                self._state.keyboard.modifiers = Modifiers(
                    shift=shift, ctrl=ctrl, alt=alt, meta=meta
                )
            case _:
                # Key presses are not tracked yet.
                pass

    def advance_frame(self) -> None:
        """Turn edge button states into steady ones and clear per-frame values."""
        self._state.advance_frame()

    def clone_state(self) -> InputState:
        """An independent copy of the current state."""
        return copy.deepcopy(self._state)

    def take_state(self) -> InputState:
        """Return the current state and start again from an empty one."""
        state, self._state = self._state, InputState()
        return state