"""
demo.py - Demonstration run of the clipping engine.

Clips a fixed set of canonical cases against the configured window, then
a batch of randomly sampled segments, and logs every result.

    python -m lineclip.demo
"""

import logging
from dataclasses import asdict
from typing import List, Optional, Tuple

from .config import DemoConfig
from .engine import ClipResult, clip, clip_many
from .geometry import Segment
from .logging_utils import LOGGER_NAME, configure_logging
from .rng import RNG, random_segment

# Canonical cases for the default 100..200 window.
DEMO_CASES: List[Tuple[str, Segment]] = [
    ("Accept",          Segment.from_coords(110.0, 110.0, 190.0, 190.0)),
    ("Reject",          Segment.from_coords(210.0, 110.0, 250.0, 190.0)),
    ("Reject",          Segment.from_coords(50.0, 250.0, 250.0, 250.0)),
    ("Clip 2-Corners",  Segment.from_coords(50.0, 50.0, 250.0, 250.0)),
    ("Clip L-R",        Segment.from_coords(50.0, 150.0, 250.0, 150.0)),
    ("Clip T-B",        Segment.from_coords(150.0, 50.0, 150.0, 250.0)),
    ("Clip 1-End",      Segment.from_coords(150.0, 150.0, 250.0, 250.0)),
]

DemoRecord = Tuple[str, Segment, ClipResult]


def format_result(result: ClipResult) -> str:
    """`(x0, y0) -> (x1, y1)` for an accepted segment, `REJECTED` otherwise."""
    return str(result)


def run_demo(config: Optional[DemoConfig] = None) -> List[DemoRecord]:
    """Clip the canonical and sampled segments; return (label, input, result)."""
    config = config or DemoConfig()
    logger = logging.getLogger(LOGGER_NAME)
    window = config.viewport
    logger.info(f"--- Clipping Window: {window} ---")

    records: List[DemoRecord] = []
    for i, (label, segment) in enumerate(DEMO_CASES, start=1):
        result = clip(segment, window)
        logger.info(f"Test {i} ({label}): {segment}  =>  {format_result(result)}")
        records.append((label, segment, result))

    rng = RNG(seed=config.seed)
    sampled = [random_segment(window, config.margin, rng) for _ in range(config.samples)]
    for segment, result in zip(sampled, clip_many(sampled, window)):
        logger.info(f"Random: {segment}  =>  {format_result(result)}")
        records.append(("Random", segment, result))

    accepted = sum(1 for _, _, result in records if result.accepted)
    logger.info(f"Done: {accepted} accepted, {len(records) - accepted} rejected.")
    return records


def main(config: Optional[DemoConfig] = None) -> None:
    config = config or DemoConfig()
    log_path = configure_logging(
        level=config.logger_level,
        log_dir=config.log_dir,
        name=LOGGER_NAME,
        run_prefix="demo",
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.info(f"DemoConfig: {asdict(config)}")
    run_demo(config)
    if log_path:
        logger.info(f"Logs written to: {log_path}")


if __name__ == "__main__":
    main()
