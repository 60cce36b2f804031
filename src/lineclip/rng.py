"""
rng.py
------

Thread-safe random generator and random segment samplers.

Used by the demo runner and the randomized tests to produce segments
scattered in and around a viewport.
  - Supports both `random.Random` and `numpy.random.Generator` backends.
  - Every call goes through a lock, so one RNG can be shared by threads.
  - `get_rng(thread_safe=True)` returns a per-thread instance instead.
"""

from __future__ import annotations

__all__ = ["RNG", "get_rng", "random_point", "random_segment",]

import os
import time
import random
import threading
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Union

import numpy as np

from .geometry import Point, Rectangle, Segment


def _entropy_seed() -> int:
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.getrandbits(32)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe hybrid random generator.

    Attributes:
        _rng:  Backend RNG (random.Random or numpy.random.Generator).
        _lock: threading.Lock for safe concurrent access.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = False):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        self._rng = self._make_backend(seed)

    def _make_backend(self, seed: Optional[int]) -> Union[random.Random, np.random.Generator]:
        seed_val = _entropy_seed() if seed is None else seed
        if self._use_numpy:
            return np.random.default_rng(seed_val)
        return random.Random(seed_val)

    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._rng = self._make_backend(seed)

    # -----------------------------------------------------------------
    # Scalar draws
    # -----------------------------------------------------------------
    def random(self) -> float:
        with self._lock:
            return float(self._rng.random())

    def uniform(self, a: float, b: float) -> float:
        with self._lock:
            return float(self._rng.uniform(a, b))

    def choice(self, seq: Sequence[Any]) -> Any:
        with self._lock:
            if self._use_numpy:
                out = seq[int(self._rng.integers(0, len(seq)))]
            else:
                out = self._rng.choice(seq)
        if isinstance(out, Integral):
            return int(out)
        if isinstance(out, Real):
            return float(out)
        return out

    # -----------------------------------------------------------------
    # State
    # -----------------------------------------------------------------
    def getstate(self):
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def __repr__(self) -> str:
        backend = "numpy" if self._use_numpy else "stdlib"
        return f"<RNG backend={backend} pid={os.getpid()} id={id(self)}>"


# =============================================================================
# GLOBAL & THREAD-LOCAL ACCESSORS
# =============================================================================
_global_rngs = {False: RNG()}
_global_lock = threading.Lock()
_thread_local = threading.local()


def get_rng(thread_safe: bool = False, use_numpy: bool = False) -> RNG:
    """Return an RNG instance (shared or per-thread).

    Instances are cached per backend, so `use_numpy` is always honored.
    """
    if thread_safe:
        if not hasattr(_thread_local, "rngs"):
            _thread_local.rngs = {}
        cache = _thread_local.rngs
        if use_numpy not in cache:
            cache[use_numpy] = RNG(use_numpy=use_numpy)
        return cache[use_numpy]
    with _global_lock:
        if use_numpy not in _global_rngs:
            _global_rngs[use_numpy] = RNG(use_numpy=use_numpy)
        return _global_rngs[use_numpy]


# =============================================================================
# Samplers
# =============================================================================
def random_point(rect: Rectangle, margin: float = 0.5, rng: Optional[RNG] = None) -> Point:
    """
    Draw a point uniformly from `rect` grown by `margin` times its size on
    every side, so that roughly half of the points fall outside for the
    default margin.
    """
    rng = rng or get_rng()
    mx, my = margin * rect.width, margin * rect.height
    return Point(rng.uniform(rect.xmin - mx, rect.xmax + mx),
                 rng.uniform(rect.ymin - my, rect.ymax + my))


def random_segment(rect: Rectangle, margin: float = 0.5, rng: Optional[RNG] = None) -> Segment:
    rng = rng or get_rng()
    return Segment(random_point(rect, margin, rng), random_point(rect, margin, rng))
