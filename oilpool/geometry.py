"""Line geometry for the tic-tac-toe board, its pieces and score digits."""

from __future__ import annotations

import math
from dataclasses import dataclass

from oilpool.input_state import Position
from oilpool.lines import Line

O_SEGMENTS = 32


@dataclass
class BoardLayout:
    """Placement and size of the 3x3 board on screen."""

    center_x: float
    center_y: float
    cell_size: float
    line_thickness: float

    @classmethod
    def centered(cls, screen_width: float, screen_height: float) -> BoardLayout:
        """A board centred on the screen, spanning 60% of its shorter side."""
        size = min(screen_width, screen_height) * 0.6
        return cls(
            center_x=screen_width / 2.0,
            center_y=screen_height / 2.0,
            cell_size=size / 3.0,
            line_thickness=4.0,
        )

    @property
    def board_width(self) -> float:
        return self.cell_size * 3.0

    def _top_left(self) -> Position:
        half = self.board_width / 2.0
        return (self.center_x - half, self.center_y - half)

    def cell_center(self, row: int, col: int) -> Position:
        """Screen position of the centre of a cell."""
        left, top = self._top_left()
        return (
            left + (col + 0.5) * self.cell_size,
            top + (row + 0.5) * self.cell_size,
        )

    def screen_to_cell(self, screen_x: float, screen_y: float) -> tuple[int, int] | None:
        """The (row, col) under a screen point, or None outside the board."""
        left, top = self._top_left()
        rel_x = screen_x - left
        rel_y = screen_y - top
        width = self.board_width
        if rel_x < 0.0 or rel_y < 0.0 or rel_x >= width or rel_y >= width:
            return None
        col = int(rel_x / self.cell_size)
        row = int(rel_y / self.cell_size)
        if row < 3 and col < 3:
            return (row, col)
        return None

    def world_to_screen(self, world_pos: Position) -> Position:
        """Map board-relative world units (cell sizes, origin at centre) to screen."""
        return (
            self.center_x + world_pos[0] * self.cell_size,
            self.center_y + world_pos[1] * self.cell_size,
        )

    def screen_to_world(self, screen_pos: Position) -> Position:
        """Inverse of ``world_to_screen``."""
        return (
            (screen_pos[0] - self.center_x) / self.cell_size,
            (screen_pos[1] - self.center_y) / self.cell_size,
        )


def generate_board_grid(layout: BoardLayout) -> list[Line]:
    """The two horizontal and two vertical interior grid lines."""
    left, top = layout._top_left()
    right = left + layout.board_width
    bottom = top + layout.board_width
    offsets = [i * layout.cell_size for i in (1, 2)]
    horizontal = [
        Line((left, top + dy), (right, top + dy), layout.line_thickness) for dy in offsets
    ]
    vertical = [
        Line((left + dx, top), (left + dx, bottom), layout.line_thickness) for dx in offsets
    ]
    return horizontal + vertical


def generate_x(layout: BoardLayout, row: int, col: int) -> list[Line]:
    """Two diagonals forming an X in a cell."""
    cx, cy = layout.cell_center(row, col)
    half = layout.cell_size * 0.6 / 2.0
    return [
        Line((cx - half, cy - half), (cx + half, cy + half), layout.line_thickness),
        Line((cx + half, cy - half), (cx - half, cy + half), layout.line_thickness),
    ]


def generate_o(layout: BoardLayout, row: int, col: int) -> list[Line]:
    """A circle of short segments forming an O in a cell."""
    cx, cy = layout.cell_center(row, col)
    radius = layout.cell_size * 0.3

    def point(i: int) -> Position:
        angle = i / O_SEGMENTS * 2.0 * math.pi
        return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))

    return [
        Line(point(i), point(i + 1), layout.line_thickness) for i in range(O_SEGMENTS)
    ]


_TOP = (0.0, 0.0, 1.0, 0.0)
_TOP_LEFT = (0.0, 0.0, 0.0, 0.5)
_TOP_RIGHT = (1.0, 0.0, 1.0, 0.5)
_MIDDLE = (0.0, 0.5, 1.0, 0.5)
_BOTTOM_LEFT = (0.0, 0.5, 0.0, 1.0)
_BOTTOM_RIGHT = (1.0, 0.5, 1.0, 1.0)
_BOTTOM = (0.0, 1.0, 1.0, 1.0)

# Seven-segment patterns in normalised (x1, y1, x2, y2) coordinates.
DIGIT_SEGMENTS: tuple[tuple[tuple[float, float, float, float], ...], ...] = (
    (_TOP, _TOP_LEFT, _TOP_RIGHT, _BOTTOM_LEFT, _BOTTOM_RIGHT, _BOTTOM),
    (_TOP_RIGHT, _BOTTOM_RIGHT),
    (_TOP, _TOP_RIGHT, _MIDDLE, _BOTTOM_LEFT, _BOTTOM),
    (_TOP, _TOP_RIGHT, _MIDDLE, _BOTTOM_RIGHT, _BOTTOM),
    (_TOP_LEFT, _MIDDLE, _TOP_RIGHT, _BOTTOM_RIGHT),
    (_TOP, _TOP_LEFT, _MIDDLE, _BOTTOM_RIGHT, _BOTTOM),
    (_TOP, _TOP_LEFT, _MIDDLE, _BOTTOM_LEFT, _BOTTOM_RIGHT, _BOTTOM),
    (_TOP, _TOP_RIGHT, _BOTTOM_RIGHT),
    (_TOP, _TOP_LEFT, _TOP_RIGHT, _MIDDLE, _BOTTOM_LEFT, _BOTTOM_RIGHT, _BOTTOM),
    (_TOP, _TOP_LEFT, _TOP_RIGHT, _MIDDLE, _BOTTOM_RIGHT, _BOTTOM),
)


def generate_digit(
    digit: int, x: float, y: float, width: float, height: float, thickness: float
) -> list[Line]:
    """Seven-segment lines for a digit with its top-left at (x, y).

    Digits above 9 produce no lines.
    """
    if digit < 0:
        raise ValueError(f"digit must not be negative: {digit}")
    if digit > 9:
        return []
    return [
        Line((x + x1 * width, y + y1 * height), (x + x2 * width, y + y2 * height), thickness)
        for x1, y1, x2, y2 in DIGIT_SEGMENTS[digit]
    ]


def generate_number(
    number: int,
    x: float,
    y: float,
    digit_width: float,
    digit_height: float,
    spacing: float,
    thickness: float,
) -> list[Line]:
    """Seven-segment lines for a non-negative number, digits laid out left to right."""
    if number < 0:
        raise ValueError(f"number must not be negative: {number}")
    step = digit_width + spacing
    return [
        line
        for i, char in enumerate(str(number))
        for line in generate_digit(
            int(char), x + i * step, y, digit_width, digit_height, thickness
        )
    ]