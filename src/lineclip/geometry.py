"""
geometry.py
-----------

Immutable value types used by the clipping engine.

  - Point:     finite (x, y) coordinate pair
  - Rectangle: axis-aligned viewport (xmin, xmax, ymin, ymax)
  - Segment:   ordered pair of points, possibly degenerate

Invariants are enforced at construction, so any instance that exists is
valid input for the classifier and the engine. The `as_*` helpers coerce
plain sequences (tuples, lists, numpy rows) into these types.
"""

from __future__ import annotations

__all__ = ["Point", "Rectangle", "Segment", "as_point", "as_segment", "as_rectangle",]

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidInputError, InvalidViewportError


def _finite(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a real number, not {value!r}")
    out = float(value)
    if not math.isfinite(out):
        raise InvalidInputError(f"{name} must be finite, got {out}")
    return out


# =============================================================================
# Value types
# =============================================================================
@dataclass(frozen=True)
class Point:
    """A point in the plane with finite coordinates."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite(self.x, "x"))
        object.__setattr__(self, "y", _finite(self.y, "y"))

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned clipping viewport.

    Bounds are inclusive: a point lying exactly on an edge is visible.
    A rectangle with swapped bounds is rejected, never normalized.

    Raises:
        InvalidInputError:    any bound is NaN or infinite.
        InvalidViewportError: xmin > xmax or ymin > ymax.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        for name in ("xmin", "xmax", "ymin", "ymax"):
            object.__setattr__(self, name, _finite(getattr(self, name), name))
        if self.xmin > self.xmax:
            raise InvalidViewportError(f"xmin ({self.xmin}) > xmax ({self.xmax})")
        if self.ymin > self.ymax:
            raise InvalidViewportError(f"ymin ({self.ymin}) > ymax ({self.ymax})")

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def contains(self, point: Point) -> bool:
        """True if `point` lies inside or on the boundary."""
        return (self.xmin <= point.x <= self.xmax and
                self.ymin <= point.y <= self.ymax)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.xmin, self.xmax, self.ymin, self.ymax)


@dataclass(frozen=True)
class Segment:
    """Ordered pair of points. p0 == p1 is a valid, zero-length segment."""
    p0: Point
    p1: Point

    def __post_init__(self):
        object.__setattr__(self, "p0", as_point(self.p0))
        object.__setattr__(self, "p1", as_point(self.p1))

    def __str__(self) -> str:
        return f"{self.p0} -> {self.p1}"

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> Segment:
        return cls(Point(x0, y0), Point(x1, y1))

    @property
    def is_degenerate(self) -> bool:
        return self.p0 == self.p1

    @property
    def dx(self) -> float:
        return self.p1.x - self.p0.x

    @property
    def dy(self) -> float:
        return self.p1.y - self.p0.y

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    def to_array(self) -> np.ndarray:
        """Return a (2, 2) array [[x0, y0], [x1, y1]]."""
        return np.array([self.p0.to_tuple(), self.p1.to_tuple()], dtype=np.float64)


# =============================================================================
# Coercion helpers
# =============================================================================
PointLike = Union[Point, Sequence[float]]
SegmentLike = Union[Segment, Sequence[PointLike]]
RectangleLike = Union[Rectangle, Sequence[float]]


def _unpack(value: Any, size: int, what: str) -> list:
    try:
        items = list(value)
    except TypeError as e:
        raise InvalidInputError(f"{what} must be a sequence, not {type(value).__name__}") from e
    if len(items) != size:
        raise InvalidInputError(f"{what} needs {size} items, got {len(items)}")
    return items


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = _unpack(value, 2, "Point")
    return Point(x, y)


def as_segment(value: SegmentLike) -> Segment:
    if isinstance(value, Segment):
        return value
    p0, p1 = _unpack(value, 2, "Segment")
    return Segment(as_point(p0), as_point(p1))


def as_rectangle(value: RectangleLike) -> Rectangle:
    """Coerce `(xmin, xmax, ymin, ymax)` into a Rectangle."""
    if isinstance(value, Rectangle):
        return value
    xmin, xmax, ymin, ymax = _unpack(value, 4, "Rectangle")
    return Rectangle(xmin, xmax, ymin, ymax)
