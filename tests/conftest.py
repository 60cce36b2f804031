"""
-------
conftest.py
-------
Shared pytest fixtures for clipping tests.
"""

import logging

import pytest

from lineclip.geometry import Rectangle
from lineclip.logging_utils import LOGGER_NAME
from lineclip.rng import RNG


# -----------------------------------------------------------------------------
# Viewports
# -----------------------------------------------------------------------------
@pytest.fixture
def square() -> Rectangle:
  """The [0, 10] x [0, 10] viewport."""
  return Rectangle(0.0, 10.0, 0.0, 10.0)


@pytest.fixture
def window() -> Rectangle:
  """The [100, 200] x [100, 200] demo window."""
  return Rectangle(100.0, 200.0, 100.0, 200.0)


# -----------------------------------------------------------------------------
# RNG
# -----------------------------------------------------------------------------
@pytest.fixture
def seeded_rng() -> RNG:
  """Deterministic RNG for randomized property checks."""
  return RNG(seed=123)


# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
@pytest.fixture
def clean_logger():
  """Detach any handlers a test installs on the package logger."""
  logger = logging.getLogger(LOGGER_NAME)
  level = logger.level
  yield logger
  for h in list(logger.handlers):
    logger.removeHandler(h)
    h.close()
  logger.setLevel(level)
