"""Geometry for the game's primitives and a renderer that paints them with pygame."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import pygame

from meteorfall.font import lit_segments
from meteorfall.utils import Vector2

# The game's circles are traced with this approximation of pi.
APPROX_PI = 3.14

Rect = tuple[float, float, float, float]
Point = tuple[float, float]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_rgba(self) -> tuple[int, int, int, int]:
        """Return the colour as 0..255 integer channels."""
        return tuple(round(max(0.0, min(1.0, c)) * 255) for c in (self.r, self.g, self.b, self.a))


WHITE = Color(1, 1, 1, 1)
RED = Color(1, 0, 0, 1)
CYAN = Color(0, 1, 1, 1)
BLACK = Color(0, 0, 0, 1)


def circle_points(cx: float, cy: float, r: float, segments: float) -> list[Point]:
    """Return the vertices tracing a circle of ``segments`` sides, first point repeated."""
    if segments <= 0:
        raise ValueError(f"segments must be positive, got {segments!r}")
    points = []
    i = 0
    while i <= segments:
        angle = 2.0 * APPROX_PI * i / segments
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
        i += 1
    return points


def digit_rects(x: float, y: float, height: float, digit: int) -> list[Rect]:
    """Return the rectangles ``(x, y, w, h)`` that draw ``digit`` centred on ``(x, y)``."""
    h = height
    thick = int(h / 10)
    geometry = (
        (x - h / 4, y - h / 2, h / 2, thick),
        (x - h / 4, y - h / 2, thick, h / 2),
        (x + h / 4, y - h / 2, thick, h / 2),
        (x - h / 4, y, h / 2, thick),
        (x - h / 4, y, thick, h / 2),
        (x + h / 4, y, thick, h / 2),
        (x - h / 4, y + h / 2, h / 2, thick),
    )
    return [geometry[index] for index in lit_segments(digit)]


def text_rects(x: float, y: float, height: float, txt: Optional[str]) -> list[Rect]:
    """Return the rectangles drawing a string of digits left to right."""
    if txt is None:
        return []
    rects: list[Rect] = []
    offset = 0
    for char in txt:
        rects.extend(digit_rects(x + offset, y, height, ord(char) - ord("0")))
        offset = int(offset + height / 2 + height / 5)
    return rects


def _xy(point) -> Point:
    if isinstance(point, Vector2):
        return (point.x, point.y)
    return (point[0], point[1])


class Renderer:
    """Paints the game's primitives onto a pygame surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def begin(self) -> None:
        """Clear the frame to black."""
        self.surface.fill(BLACK.as_rgba())

    def end(self) -> None:
        """Present the frame if the surface is the display."""
        if pygame.display.get_init() and self.surface is pygame.display.get_surface():
            pygame.display.flip()

    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        corners = [(x, y), (x, y + h), (x + w, y + h), (x + w, y)]
        pygame.draw.polygon(self.surface, color.as_rgba(), corners)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
        pygame.draw.line(self.surface, color.as_rgba(), (x1, y1), (x2, y2), 2)

    def draw_circle(self, cx: float, cy: float, r: float, segments: float, color: Color) -> None:
        points = circle_points(cx, cy, r, segments)
        if len(points) >= 2:
            pygame.draw.lines(self.surface, color.as_rgba(), True, points)

    def draw_triangle(self, p1, p2, p3, color: Color) -> None:
        pygame.draw.polygon(self.surface, color.as_rgba(), [_xy(p1), _xy(p2), _xy(p3)])

    def fill_circle(self, cx: float, cy: float, r: float, segments: float, color: Color) -> None:
        points = [(cx, cy), *circle_points(cx, cy, r, segments)]
        pygame.draw.polygon(self.surface, color.as_rgba(), points)

    def draw_digit(self, x: float, y: float, height: float, digit: int, color: Color) -> None:
        for rect in digit_rects(x, y, height, digit):
            self.draw_rect(*rect, color)

    def draw_text(self, x: float, y: float, height: float, txt: Optional[str], color: Color) -> None:
        for rect in text_rects(x, y, height, txt):
            self.draw_rect(*rect, color)

    def draw_heart_left(self, x: float, y: float, w: float, h: float) -> None:
        """Draw the left half of a heart: a disc over a triangle pointing down-right."""
        self.fill_circle(x, y, w / 2, 10, RED)
        self.draw_triangle(
            (x - w / 2, y + h * 2 / 8), (x + w / 2, y + h * 2 / 8), (x + w / 2, y + h), RED
        )

    def draw_heart_right(self, x: float, y: float, w: float, h: float) -> None:
        """Draw the right half of a heart: a disc over a triangle pointing down-left."""
        self.fill_circle(x, y, w / 2, 10, RED)
        self.draw_triangle(
            (x - w / 2, y + h * 2 / 8), (x + w / 2, y + h * 2 / 8), (x - w / 2, y + h), RED
        )