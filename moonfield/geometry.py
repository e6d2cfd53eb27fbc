"""Plain 2D geometry: vectors, rectangles and collision checks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D point or displacement."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.width / 2, self.y + self.height / 2)


def circle_rect_collide(center: Vector2, radius: float, rect: Rect) -> bool:
    """Return True if the circle touches or overlaps the rectangle."""
    half_w = rect.width / 2
    half_h = rect.height / 2
    dx = abs(center.x - (rect.x + half_w))
    dy = abs(center.y - (rect.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def point_in_rect(point: Vector2, rect: Rect) -> bool:
    """Return True if the point lies inside the rectangle (right/bottom edges excluded)."""
    return rect.x <= point.x < rect.right and rect.y <= point.y < rect.bottom


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Return True if the two rectangles share any area."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def any_collides(items: Iterable[T], condition: Callable[[T], bool]) -> bool:
    """Return True as soon as one item satisfies the condition."""
    return any(condition(item) for item in items)