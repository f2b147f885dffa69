import pytest

from kinechain.geometry import Vec2
from kinechain.mouse import MouseButton, MouseState


def test_initial_state():
    state = MouseState()
    assert all(not state.is_button_clicked(button) for button in MouseButton)
    assert state.position() == Vec2(0.0, 0.0)
    assert state.translation() == Vec2(0.0, 0.0)


def test_click_and_release():
    state = MouseState()
    state.button_clicked(MouseButton.LEFT)
    assert state.is_button_clicked(MouseButton.LEFT) is True
    assert state.is_button_clicked(MouseButton.RIGHT) is False
    state.button_released(MouseButton.LEFT)
    assert state.is_button_clicked(MouseButton.LEFT) is False


def test_buttons_are_independent():
    state = MouseState()
    state.button_clicked(MouseButton.RIGHT)
    state.button_clicked(MouseButton.MIDDLE)
    state.button_released(MouseButton.RIGHT)
    assert state.is_button_clicked(MouseButton.MIDDLE) is True
    assert state.is_button_clicked(MouseButton.RIGHT) is False


def test_moved_updates_position_and_translation():
    state = MouseState()
    state.moved(10.0, 20.0)
    assert state.position() == Vec2(10.0, 20.0)
    assert state.translation() == Vec2(10.0, 20.0)
    state.moved(15.0, 18.0)
    assert state.position() == Vec2(15.0, 18.0)
    assert state.translation() == Vec2(15.0 - 10.0, 18.0 - 20.0)


def test_unknown_button_raises():
    state = MouseState()
    with pytest.raises(ValueError):
        state.button_clicked(7)