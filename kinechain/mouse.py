"""Mouse button and cursor tracking."""

from __future__ import annotations

from enum import IntEnum

from .geometry import Vec2


class MouseButton(IntEnum):
    RIGHT = 0
    MIDDLE = 1
    LEFT = 2


class MouseState:
    """Which buttons are held and where the cursor is and was."""

    def __init__(self) -> None:
        self._pressed: dict[MouseButton, bool] = {button: False for button in MouseButton}
        self._old_position = Vec2(0.0, 0.0)
        self._position = Vec2(0.0, 0.0)

    def button_clicked(self, button: MouseButton) -> None:
        self._pressed[MouseButton(button)] = True

    def button_released(self, button: MouseButton) -> None:
        self._pressed[MouseButton(button)] = False

    def is_button_clicked(self, button: MouseButton) -> bool:
        return self._pressed[MouseButton(button)]

    def moved(self, x: float, y: float) -> None:
        self._old_position = self._position
        self._position = Vec2(x, y)

    def translation(self) -> Vec2:
        """Movement between the last two cursor positions."""
        return self._position - self._old_position

    def position(self) -> Vec2:
        return self._position