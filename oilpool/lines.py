"""Thick line segments expanded into triangle geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from oilpool.input_state import Position

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)


@dataclass(frozen=True)
class LineVertex:
    """A vertex of line geometry in screen coordinates."""

    position: Position
    color: Color


@dataclass(frozen=True)
class Line:
    """A line segment with a thickness, drawn as a quad."""

    start: Position
    end: Position
    thickness: float
    color: Color = WHITE

    def to_vertices(self) -> list[LineVertex]:
        """Two triangles covering the thick segment; empty for a zero-length line."""
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        length = math.hypot(dx, dy)
        if length == 0.0:
            return []

        half = self.thickness * 0.5
        px = -dy / length * half
        py = dx / length * half

        def vertex(x: float, y: float) -> LineVertex:
            return LineVertex(position=(x, y), color=self.color)

        v1 = vertex(self.start[0] + px, self.start[1] + py)
        v2 = vertex(self.start[0] - px, self.start[1] - py)
        v3 = vertex(self.end[0] - px, self.end[1] - py)
        v4 = vertex(self.end[0] + px, self.end[1] + py)
        return [v1, v2, v3, v1, v3, v4]


@dataclass
class LineBatch:
    """Lines collected for one frame, turned into a triangle list on demand."""

    lines: list[Line] = field(default_factory=list)

    def draw_line(self, start: Position, end: Position, thickness: float) -> None:
        """Queue a white line."""
        self.lines.append(Line(start, end, thickness))

    def clear(self) -> None:
        """Drop all queued lines."""
        self.lines.clear()

    def vertices(self) -> list[LineVertex]:
        """Triangle-list vertices for every queued line, in order."""
        return [vertex for line in self.lines for vertex in line.to_vertices()]