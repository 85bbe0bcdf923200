import dataclasses

import pytest

from oilpool.input_state import (
    ButtonState,
    InputState,
    KeyboardState,
    Modifiers,
    MouseButtons,
    MouseState,
)


@pytest.mark.parametrize(
    ("before", "after"),
    [
        (ButtonState.JUST_PRESSED, ButtonState.PRESSED),
        (ButtonState.JUST_RELEASED, ButtonState.RELEASED),
        (ButtonState.PRESSED, ButtonState.PRESSED),
        (ButtonState.RELEASED, ButtonState.RELEASED),
    ],
)
def test_advance_transitions(before, after):
    assert before.advance() is after


@pytest.mark.parametrize(
    "state",
    [
        ButtonState.RELEASED,
        ButtonState.JUST_PRESSED,
        ButtonState.PRESSED,
        ButtonState.JUST_RELEASED,
    ],
)
def test_advance_is_idempotent_after_one_step(state):
    once = ButtonState.advance(state)
    assert ButtonState.advance(once) is once


@pytest.mark.parametrize(
    ("state", "down"),
    [
        (ButtonState.RELEASED, False),
        (ButtonState.JUST_PRESSED, True),
        (ButtonState.PRESSED, True),
        (ButtonState.JUST_RELEASED, False),
    ],
)
def test_is_down(state, down):
    assert state.is_down() is down


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        (ButtonState.RELEASED, False),
        (ButtonState.JUST_PRESSED, True),
        (ButtonState.PRESSED, False),
        (ButtonState.JUST_RELEASED, False),
    ],
)
def test_only_just_pressed_is_just_pressed(state, expected):
    assert ButtonState.is_just_pressed(state) is expected


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        (ButtonState.RELEASED, False),
        (ButtonState.JUST_PRESSED, False),
        (ButtonState.PRESSED, False),
        (ButtonState.JUST_RELEASED, True),
    ],
)
def test_only_just_released_is_just_released(state, expected):
    assert ButtonState.is_just_released(state) is expected


def test_default_input_state():
    state = InputState()
    assert state.mouse.window_pos is None
    assert state.mouse.screen_pos is None
    assert state.mouse.scroll_delta == (0.0, 0.0)
    assert state.mouse.buttons == MouseButtons(
        ButtonState.RELEASED, ButtonState.RELEASED, ButtonState.RELEASED
    )
    assert state.keyboard.modifiers == Modifiers(False, False, False, False)
    assert state.time == 0.0


def test_advance_frame_advances_buttons_and_clears_scroll():
    state = InputState(
        mouse=MouseState(
            screen_pos=(10.0, 20.0),
            buttons=MouseButtons(
                left=ButtonState.JUST_PRESSED,
                right=ButtonState.JUST_RELEASED,
                middle=ButtonState.PRESSED,
            ),
            scroll_delta=(3.0, -4.0),
        )
    )
    state.advance_frame()
    assert state.mouse.buttons.left is ButtonState.PRESSED
    assert state.mouse.buttons.right is ButtonState.RELEASED
    assert state.mouse.buttons.middle is ButtonState.PRESSED
    assert state.mouse.scroll_delta == (0.0, 0.0)
    assert state.mouse.screen_pos == (10.0, 20.0)


def test_advance_frame_keeps_modifiers():
    mods = Modifiers(shift=True, meta=True)
    state = InputState(keyboard=KeyboardState(modifiers=mods))
    state.advance_frame()
    assert state.keyboard.modifiers == mods


def test_states_do_not_share_defaults():
    first = InputState()
    second = InputState()
    first.mouse.buttons.left = ButtonState.PRESSED
    assert second.mouse.buttons.left is ButtonState.RELEASED


def test_modifiers_are_immutable():
    mods = Modifiers()
    with pytest.raises(dataclasses.FrozenInstanceError):
        mods.shift = True
    assert mods.shift is False
    assert mods == Modifiers(False, False, False, False)