"""
errors.py
---------

Exception taxonomy for the clipping engine.

All errors are raised synchronously before any classification happens;
there is never a partial result.
"""

__all__ = ["ClipError", "InvalidViewportError", "InvalidInputError"]


class ClipError(ValueError):
    """Base class for all clipping failures."""
    kind: str = "clip_error"


class InvalidViewportError(ClipError):
    """Viewport bounds violate xmin <= xmax or ymin <= ymax."""
    kind = "invalid_viewport"


class InvalidInputError(ClipError):
    """A coordinate is NaN/infinite, or an input has the wrong shape."""
    kind = "invalid_input"
