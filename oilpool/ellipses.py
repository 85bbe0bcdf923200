"""Filled, rotated ellipses expanded into triangle-fan geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from oilpool.input_state import Position
from oilpool.lines import Color

DEFAULT_SEGMENTS = 16


@dataclass(frozen=True)
class EllipseVertex:
    """A vertex of ellipse geometry in screen coordinates, with opacity."""

    position: Position
    color: Color
    alpha: float


@dataclass(frozen=True)
class Ellipse:
    """A filled ellipse, rotated by ``rotation`` radians about its centre."""

    center: Position
    radius_x: float
    radius_y: float
    rotation: float
    color: Color
    alpha: float

    def point_at_angle(self, angle: float) -> Position:
        """The perimeter point at a parametric angle, after rotation."""
        x = self.radius_x * math.cos(angle)
        y = self.radius_y * math.sin(angle)
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        return (
            self.center[0] + x * cos_r - y * sin_r,
            self.center[1] + x * sin_r + y * cos_r,
        )

    def to_vertices(self, segments: int) -> list[EllipseVertex]:
        """Triangle-list vertices: one (centre, edge, next edge) triangle per segment."""
        if segments < 0:
            raise ValueError(f"segments must not be negative: {segments}")

        def vertex(position: Position) -> EllipseVertex:
            return EllipseVertex(position=position, color=self.color, alpha=self.alpha)

        center = vertex(self.center)
        vertices: list[EllipseVertex] = []
        for i in range(segments):
            angle1 = i / segments * 2.0 * math.pi
            angle2 = (i + 1) / segments * 2.0 * math.pi
            vertices.extend(
                (
                    center,
                    vertex(self.point_at_angle(angle1)),
                    vertex(self.point_at_angle(angle2)),
                )
            )
        return vertices


@dataclass
class EllipseBatch:
    """Ellipses collected for one frame, turned into a triangle list on demand."""

    ellipses: list[Ellipse] = field(default_factory=list)
    segments: int = DEFAULT_SEGMENTS

    def draw_ellipse(self, ellipse: Ellipse) -> None:
        """Queue an ellipse."""
        self.ellipses.append(ellipse)

    def clear(self) -> None:
        """Drop all queued ellipses."""
        self.ellipses.clear()

    def vertices(self) -> list[EllipseVertex]:
        """Triangle-list vertices for every queued ellipse, in order."""
        return [
            vertex
            for ellipse in self.ellipses
            for vertex in ellipse.to_vertices(self.segments)
        ]