"""Mouse state of the image view: clicks, drags and drawn lines."""

from __future__ import annotations

from typing import Callable

Point = tuple[int, int]
Line = tuple[int, int, int, int]

LEFT_BUTTON = 1
RIGHT_BUTTON = 2
MIDDLE_BUTTON = 4

_ORIGIN: Point = (0, 0)


class MouseTracker:
    """Tracks mouse events on the image view.

    ``on_line`` is called with (x1, y1, x2, y2) once on creation and each time
    a left-button drag ends.
    """

    def __init__(self, on_line: Callable[[Line], None] | None = None) -> None:
        self._on_line = on_line
        self._left_pressed = False
        self._last_left_pressed = False
        self.mouse_position: Point = _ORIGIN
        self._last_mouse_position: Point = _ORIGIN
        self.line_start: Point = _ORIGIN
        self.line_end: Point = _ORIGIN
        self._left_press: Point = _ORIGIN
        self._right_press: Point = _ORIGIN
        self._emit_line()

    def _emit_line(self) -> None:
        if self._on_line is not None:
            self._on_line((*self.line_start, *self.line_end))

    def press(self, x: int, y: int, button: int) -> None:
        """A button went down at (x, y)."""
        self.mouse_position = (x, y)
        self._left_pressed = False
        if button & LEFT_BUTTON:
            self._left_pressed = True
            self.line_start = (x, y)
            self._left_press = (x, y)
        if button & RIGHT_BUTTON:
            self._right_press = (x, y)

    def move(self, x: int, y: int, buttons: int) -> None:
        """The mouse moved to (x, y) with ``buttons`` held."""
        self.mouse_position = (x, y)
        self._left_pressed = bool(buttons & LEFT_BUTTON)
        if self._left_pressed:
            self.line_end = (x, y)

    def release(self, x: int, y: int, button: int) -> None:
        """A button came up at (x, y); a left release completes a line."""
        self.mouse_position = (x, y)
        self._left_pressed = False
        if button & LEFT_BUTTON:
            self.line_end = (x, y)
            self._emit_line()

    def take_left_press(self) -> Point:
        """Last left press position since the previous call, or (0, 0)."""
        point, self._left_press = self._left_press, _ORIGIN
        return point

    def take_right_press(self) -> Point:
        """Last right press position since the previous call, or (0, 0)."""
        point, self._right_press = self._right_press, _ORIGIN
        return point

    def left_press_movement(self) -> Line:
        """Drag made with the left button held since the previous call."""
        movement: Line = (0, 0, 0, 0)
        if self._left_pressed and self._last_left_pressed:
            movement = (*self._last_mouse_position, *self.mouse_position)
        self._last_mouse_position = self.mouse_position
        self._last_left_pressed = self._left_pressed
        return movement