"""Line plot model: series, axis range and screen layout of grid, curves and cursor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

MARGIN = 50
TICK_LENGTH = 5


class PenStyle(Enum):
    """Line style used to draw a curve."""

    SOLID = "solid"
    DASH = "dash"
    DOT = "dot"
    DASH_DOT = "dash_dot"
    DASH_DOT_DOT = "dash_dot_dot"


@dataclass(frozen=True)
class AxisRange:
    """Data range shown on the plot, padded and rounded to whole numbers."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float


@dataclass(frozen=True)
class Rect:
    """Plot area in widget pixels; ``right`` and ``bottom`` are inclusive."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1


@dataclass(frozen=True)
class Tick:
    """A grid line position with its axis label."""

    position: int
    label: str


@dataclass(frozen=True)
class Curve:
    """One series mapped to widget coordinates."""

    points: list[tuple[float, float]]
    color: Any
    style: PenStyle


@dataclass(frozen=True)
class PlotLayout:
    """Everything needed to draw the plot at a given widget size."""

    axis: AxisRange
    rect: Rect
    x_ticks: list[Tick]
    y_ticks: list[Tick]
    curves: list[Curve]
    cursor: tuple[int, int, int, int]


def _label(value: float) -> str:
    return f"{value:g}"


class Plot:
    """Holds series with their colours and pen styles plus a cursor position."""

    def __init__(self, num_x_ticks: int = 10, num_y_ticks: int = 10) -> None:
        if num_x_ticks <= 0 or num_y_ticks <= 0:
            raise ValueError("tick counts must be positive")
        self.num_x_ticks = num_x_ticks
        self.num_y_ticks = num_y_ticks
        self.data: list[list[float]] = []
        self.colors: list[Any] = []
        self.pen_styles: list[PenStyle] = []
        self.cursor = 0

    def clear_data(self) -> None:
        self.data.clear()

    def clear_colors(self) -> None:
        self.colors.clear()

    def clear_pen_styles(self) -> None:
        self.pen_styles.clear()

    def add_data(self, values: Sequence[float]) -> None:
        self.data.append([float(v) for v in values])

    def add_color(self, color: Any) -> None:
        self.colors.append(color)

    def add_pen_style(self, style: PenStyle) -> None:
        self.pen_styles.append(PenStyle(style))

    def set_cursor(self, index: int) -> None:
        self.cursor = int(index)

    def axis_range(self) -> AxisRange | None:
        """Range covering every series, padded by one unit; None with no data."""
        if not self.data:
            return None
        if any(not series for series in self.data):
            raise ValueError("cannot plot an empty series")
        max_x = float(max(len(series) for series in self.data))
        min_y = min(min(series) for series in self.data)
        max_y = max(max(series) for series in self.data)
        return AxisRange(
            min_x=float(math.floor(0.0 - 1.0)),
            max_x=float(math.ceil(max_x + 1.0)),
            min_y=float(math.floor(min_y - 1.0)),
            max_y=float(math.ceil(max_y + 1.0)),
        )

    def layout(self, width: int, height: int) -> PlotLayout | None:
        """Grid, curves and cursor for a widget of ``width`` x ``height``; None with no data."""
        axis = self.axis_range()
        if axis is None:
            return None
        if len(self.colors) < len(self.data) or len(self.pen_styles) < len(self.data):
            raise ValueError("every series needs a colour and a pen style")

        rect = Rect(MARGIN, MARGIN, width - 2 * MARGIN, height - 2 * MARGIN)
        span_x = axis.max_x - axis.min_x
        span_y = axis.max_y - axis.min_y

        x_step = rect.width // self.num_x_ticks
        x_ticks = [
            Tick(
                rect.left + i * x_step,
                _label(axis.min_x + i * span_x / self.num_x_ticks),
            )
            for i in range(self.num_x_ticks + 1)
        ]
        y_step = rect.height // self.num_y_ticks
        y_ticks = [
            Tick(
                rect.bottom - j * y_step,
                _label(axis.min_y + j * span_y / self.num_y_ticks),
            )
            for j in range(self.num_y_ticks + 1)
        ]

        curves = [
            Curve(
                points=[
                    (
                        (j - axis.min_x) / span_x * rect.width + rect.left,
                        -(value - axis.min_y) / span_y * rect.height + rect.bottom,
                    )
                    for j, value in enumerate(series)
                ],
                color=color,
                style=style,
            )
            for series, color, style in zip(self.data, self.colors, self.pen_styles)
        ]

        cursor_x = int((self.cursor - axis.min_x) / span_x * rect.width + rect.left)
        return PlotLayout(
            axis=axis,
            rect=rect,
            x_ticks=x_ticks,
            y_ticks=y_ticks,
            curves=curves,
            cursor=(cursor_x, rect.top, cursor_x, rect.bottom),
        )