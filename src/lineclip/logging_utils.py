"""
logging_utils.py
----------------

Colorized console + rotating file logging for lineclip runs.

Library modules only call `logging.getLogger(LOGGER_NAME)`; handlers are
installed by whoever drives the library (see demo.py).
"""

__all__ = ["LOGGER_NAME", "configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init

PathLike = Union[str, os.PathLike]
LOGGER_NAME = "lineclip"


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        level_str = f"{record.levelname:<5s}"
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.name}] "
            f"[{color}{level_str}{reset}] "
            f"{record.getMessage()}"
        )


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: str = LOGGER_NAME,
                      run_prefix: str = "run") -> Optional[Path]:
    """
    Configure colorized console logging, plus a rotating log file when
    `log_dir` is given.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    colorama_init(strip=False, convert=True)

    mono_fmt = "[%(asctime)s] [%(name)s] [%(levelname)-5s] %(message)s"
    datefmt = "%H:%M:%S"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"
        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5,
                                 encoding="utf-8")
        fh.setFormatter(logging.Formatter(mono_fmt, datefmt))
        logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
