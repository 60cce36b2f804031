"""
lineclip
--------

Cohen-Sutherland clipping of 2D line segments against an axis-aligned
rectangular viewport.

    >>> from lineclip import Segment, Rectangle, clip
    >>> str(clip(Segment.from_coords(0, 0, 10, 10), Rectangle(2, 8, 2, 8)))
    '(2.0, 2.0) -> (8.0, 8.0)'
"""

from .errors import ClipError, InvalidViewportError, InvalidInputError
from .geometry import Point, Rectangle, Segment, as_point, as_segment, as_rectangle
from .outcode import Outcode, classify
from .engine import Accepted, Rejected, ClipResult, clip, clip_many, clip_array

__version__ = "0.1.0"

__all__ = [
    "ClipError", "InvalidViewportError", "InvalidInputError",
    "Point", "Rectangle", "Segment", "as_point", "as_segment", "as_rectangle",
    "Outcode", "classify",
    "Accepted", "Rejected", "ClipResult", "clip", "clip_many", "clip_array",
]
