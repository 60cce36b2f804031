"""
test_geometry.py
----------------
Unit tests for geometry.py value types and coercion helpers.
"""

import math

import numpy as np
import pytest

from lineclip.errors import ClipError, InvalidInputError, InvalidViewportError
from lineclip.geometry import (Point, Rectangle, Segment,
                               as_point, as_rectangle, as_segment)


# ---------------------------------------------------------------------------
# 1. Point
# ---------------------------------------------------------------------------

def test_point_coerces_to_float():
  p = Point(1, np.float32(2.5))
  assert isinstance(p.x, float) and isinstance(p.y, float)
  assert p.to_tuple() == (1.0, 2.5)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_point_rejects_non_finite(bad):
  with pytest.raises(InvalidInputError):
    Point(bad, 0.0)
  with pytest.raises(InvalidInputError):
    Point(0.0, bad)


@pytest.mark.parametrize("value", ["left", "1.5", b"2", True, False, None, [1.0]])
def test_point_rejects_non_numeric(value):
  with pytest.raises(InvalidInputError):
    Point(value, 0.0)
  with pytest.raises(InvalidInputError):
    Point(0.0, value)


def test_point_accepts_numpy_scalars():
  assert Point(np.int64(3), np.float64(0.25)) == Point(3.0, 0.25)


def test_point_is_immutable():
  p = Point(1.0, 2.0)
  with pytest.raises(AttributeError):
    p.x = 5.0


def test_point_str_one_decimal():
  assert str(Point(10.5, 20)) == "(10.5, 20.0)"


# ---------------------------------------------------------------------------
# 2. Rectangle
# ---------------------------------------------------------------------------

def test_rectangle_accepts_zero_area():
  r = Rectangle(5.0, 5.0, 1.0, 1.0)
  assert r.width == 0.0 and r.height == 0.0


@pytest.mark.parametrize("bounds", [
    (10.0, 0.0, 0.0, 10.0),
    (0.0, 10.0, 10.0, 0.0),
])
def test_rectangle_rejects_swapped_bounds(bounds):
  with pytest.raises(InvalidViewportError) as info:
    Rectangle(*bounds)
  assert info.value.kind == "invalid_viewport"


def test_rectangle_non_finite_is_input_error():
  with pytest.raises(InvalidInputError) as info:
    Rectangle(math.nan, 0.0, 0.0, 10.0)
  assert info.value.kind == "invalid_input"


def test_errors_share_base_class():
  assert issubclass(InvalidViewportError, ClipError)
  assert issubclass(InvalidInputError, ClipError)
  assert issubclass(ClipError, ValueError)


def test_rectangle_contains_is_inclusive(square):
  assert square.contains(Point(0.0, 0.0))
  assert square.contains(Point(10.0, 5.0))
  assert not square.contains(Point(10.0001, 5.0))


# ---------------------------------------------------------------------------
# 3. Segment
# ---------------------------------------------------------------------------

def test_segment_properties():
  s = Segment.from_coords(0, 0, 3, 4)
  assert s.dx == 3.0 and s.dy == 4.0
  assert s.length == pytest.approx(5.0)
  assert not s.is_degenerate
  assert Segment.from_coords(1, 1, 1, 1).is_degenerate


def test_segment_to_array():
  arr = Segment.from_coords(1, 2, 3, 4).to_array()
  assert arr.shape == (2, 2)
  assert arr.dtype == np.float64
  assert np.array_equal(arr, [[1, 2], [3, 4]])


def test_segment_accepts_point_tuples():
  s = Segment((0, 0), (1, 1))
  assert s.p0 == Point(0.0, 0.0)
  assert s.p1 == Point(1.0, 1.0)


# ---------------------------------------------------------------------------
# 4. Coercion helpers
# ---------------------------------------------------------------------------

def test_as_helpers_pass_through_instances(square):
  p = Point(1, 1)
  s = Segment(p, p)
  assert as_point(p) is p
  assert as_segment(s) is s
  assert as_rectangle(square) is square


def test_as_helpers_from_sequences():
  assert as_point([1, 2]) == Point(1.0, 2.0)
  assert as_segment(np.array([[0, 0], [1, 2]])) == Segment.from_coords(0, 0, 1, 2)
  assert as_rectangle((0, 1, 2, 3)) == Rectangle(0.0, 1.0, 2.0, 3.0)


@pytest.mark.parametrize("value", [(1, 2, 3), 5, None])
def test_as_point_rejects_malformed(value):
  with pytest.raises(InvalidInputError):
    as_point(value)


def test_as_rectangle_rejects_wrong_length():
  with pytest.raises(InvalidInputError):
    as_rectangle((0, 1, 2))
