"""
engine.py
---------

Cohen-Sutherland line clipping against an axis-aligned viewport.

Responsibilities:
  - Validate the viewport and segment (raising ClipError subclasses)
  - Run the bounded accept / reject / clip loop
  - Return an `Accepted` or `Rejected` result value
  - Batch helpers for lists of segments and (N, 2, 2) numpy arrays

Tie-break order:
  - the first endpoint is clipped before the second when both are outside
  - the violated boundary is chosen in BOUNDARY_PRIORITY order
    (TOP, BOTTOM, RIGHT, LEFT)
"""

from __future__ import annotations

__all__ = [
    "Accepted", "Rejected", "ClipResult",
    "BOUNDARY_PRIORITY", "MAX_CLIP_STEPS",
    "clip", "clip_many", "clip_array",
]

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

import numpy as np

from .errors import InvalidInputError
from .geometry import (Point, Rectangle, Segment, RectangleLike, SegmentLike,
                       as_rectangle, as_segment)
from .logging_utils import LOGGER_NAME
from .outcode import Outcode, classify


# =============================================================================
# Constants
# =============================================================================
BOUNDARY_PRIORITY: Tuple[Outcode, ...] = (
    Outcode.TOP, Outcode.BOTTOM, Outcode.RIGHT, Outcode.LEFT,
)
# One clip per viewport edge is enough for any finite segment.
MAX_CLIP_STEPS = 4


# =============================================================================
# Result variants
# =============================================================================
@dataclass(frozen=True)
class Accepted:
    """Visible part of the segment (possibly the unchanged input)."""
    segment: Segment

    accepted = True

    @property
    def p0(self) -> Point:
        return self.segment.p0

    @property
    def p1(self) -> Point:
        return self.segment.p1

    def __str__(self) -> str:
        return str(self.segment)


@dataclass(frozen=True)
class Rejected:
    """The segment lies entirely outside the viewport."""

    accepted = False

    def __str__(self) -> str:
        return "REJECTED"


ClipResult = Union[Accepted, Rejected]


# =============================================================================
# Algorithm
# =============================================================================
def _param(target: float, start: float, end: float) -> float:
    """Parameter t in [0, 1] where start + t * (end - start) == target.

    Operands are halved so the differences stay finite for any finite
    coordinates; halving is exact, so t is unchanged.
    """
    return (0.5 * target - 0.5 * start) / (0.5 * end - 0.5 * start)


def _lerp(start: float, end: float, t: float) -> float:
    delta = end - start
    if math.isfinite(delta):
        return start + t * delta
    half = t * (0.5 * end - 0.5 * start)
    return start + half + half


def _boundary_point(out: Point, anchor: Point, code: Outcode, rect: Rectangle) -> Tuple[Outcode, Point]:
    """
    Move `out` along the line (anchor, out) onto one violated boundary.

    The boundary is the first flag of `code` in BOUNDARY_PRIORITY. The
    coordinate on that boundary is assigned exactly, the other one is
    interpolated parametrically. An axis-parallel line cannot cross a
    boundary parallel to it, so in that case the other coordinate is kept.
    """
    edge = next(flag for flag in BOUNDARY_PRIORITY if code & flag)

    if edge in (Outcode.TOP, Outcode.BOTTOM):
        y = rect.ymax if edge is Outcode.TOP else rect.ymin
        if out.y == anchor.y:
            x = out.x
        else:
            x = _lerp(anchor.x, out.x, _param(y, anchor.y, out.y))
    else:
        x = rect.xmax if edge is Outcode.RIGHT else rect.xmin
        if out.x == anchor.x:
            y = out.y
        else:
            y = _lerp(anchor.y, out.y, _param(x, anchor.x, out.x))

    return edge, Point(x, y)


def _clip(segment: Segment, rect: Rectangle) -> ClipResult:
    logger = logging.getLogger(LOGGER_NAME)
    p0, p1 = segment.p0, segment.p1
    code0, code1 = classify(p0, rect), classify(p1, rect)

    if segment.is_degenerate:
        return Accepted(segment) if code0 == Outcode.INSIDE else Rejected()

    steps = 0
    while True:
        if not (code0 | code1):
            if steps == 0:
                return Accepted(segment)
            return Accepted(Segment(p0, p1))
        if code0 & code1:
            return Rejected()
        if steps == MAX_CLIP_STEPS:
            logger.warning(f"Clip of {segment} did not settle after {steps} steps; rejecting.")
            return Rejected()
        steps += 1

        if code0:
            edge, p0 = _boundary_point(p0, p1, code0, rect)
            code0 = classify(p0, rect)
            logger.debug(f"step {steps}: p0 clipped to {edge.name} -> {p0} (code {code0.value:04b})")
        else:
            edge, p1 = _boundary_point(p1, p0, code1, rect)
            code1 = classify(p1, rect)
            logger.debug(f"step {steps}: p1 clipped to {edge.name} -> {p1} (code {code1.value:04b})")


def clip(segment: SegmentLike, rect: RectangleLike) -> ClipResult:
    """
    Clip a segment to a rectangular viewport.

    Args:
        segment: Segment, or ((x0, y0), (x1, y1)).
        rect:    Rectangle, or (xmin, xmax, ymin, ymax).

    Returns:
        ClipResult: Accepted(segment) with the visible part, or Rejected().

    Raises:
        InvalidInputError:    a coordinate is non-finite or malformed.
        InvalidViewportError: the viewport bounds are out of order.
    """
    rect = as_rectangle(rect)
    return _clip(as_segment(segment), rect)


def clip_many(segments: Iterable[SegmentLike], rect: RectangleLike) -> List[ClipResult]:
    """Clip every segment against the same viewport (validated once)."""
    rect = as_rectangle(rect)
    return [_clip(as_segment(seg), rect) for seg in segments]


def clip_array(coords, rect: RectangleLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Clip an array of segments.

    Args:
        coords: array-like of shape (N, 2, 2), rows [[x0, y0], [x1, y1]].
        rect:   Rectangle, or (xmin, xmax, ymin, ymax).

    Returns:
        (clipped, visible):
            clipped: float64 array (N, 2, 2); rejected rows are NaN.
            visible: bool array (N,); True where the row was accepted.
    """
    rect = as_rectangle(rect)
    try:
        arr = np.asarray(coords, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Cannot convert segments to a float array: {e}") from e
    if arr.ndim != 3 or arr.shape[1:] != (2, 2):
        raise InvalidInputError(f"Expected an (N, 2, 2) array, got shape {arr.shape}")

    clipped = np.full(arr.shape, np.nan, dtype=np.float64)
    visible = np.zeros(arr.shape[0], dtype=bool)
    for i, row in enumerate(arr):
        result = _clip(as_segment(row), rect)
        if result.accepted:
            clipped[i] = result.segment.to_array()
            visible[i] = True
    return clipped, visible
