"""
outcode.py
----------

Region codes for Cohen-Sutherland clipping.

A point is classified against the four half-planes of the viewport:

             |          |
     1001    |   1000   |   1010        TOP    = 8
   ----------+----------+----------     BOTTOM = 4
     0001    |   0000   |   0010        RIGHT  = 2
   ----------+----------+----------     LEFT   = 1
     0101    |   0100   |   0110
             |          |

Boundaries are inclusive, so a point on an edge gets code 0.
"""

from __future__ import annotations

__all__ = ["Outcode", "classify",]

from enum import IntFlag

from .geometry import Point, Rectangle


class Outcode(IntFlag):
    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def classify(point: Point, rect: Rectangle) -> Outcode:
    """
    Compute the outcode of `point` relative to `rect`.

    Args:
        point: Point with finite coordinates.
        rect:  Valid viewport (xmin <= xmax, ymin <= ymax).

    Returns:
        Outcode: OR of the violated boundary flags, INSIDE if none.
    """
    code = Outcode.INSIDE

    if point.x < rect.xmin:
        code |= Outcode.LEFT
    elif point.x > rect.xmax:
        code |= Outcode.RIGHT

    if point.y < rect.ymin:
        code |= Outcode.BOTTOM
    elif point.y > rect.ymax:
        code |= Outcode.TOP

    return code
