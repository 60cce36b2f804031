"""
config.py - Configuration dataclass for the demo runner.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .geometry import Rectangle


@dataclass(frozen=True)
class DemoConfig:
    """Immutable settings for a demo run."""
    logger_level: int = logging.INFO
    log_dir: Optional[Path] = Path("./logs")
    window: Tuple[float, float, float, float] = (100.0, 200.0, 100.0, 200.0)
    samples: int = 10
    margin: float = 0.5
    seed: Optional[int] = None

    def __post_init__(self):
        Rectangle(*self.window)  # raises on a bad window
        if self.samples < 0:
            raise ValueError(f"samples must be >= 0, got {self.samples}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")

    @property
    def viewport(self) -> Rectangle:
        return Rectangle(*self.window)
