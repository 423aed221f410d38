"""Logging utilities.

We use Python's standard `logging` module with the same line format as the
rest of the platform tooling.

- Console handler always (INFO, or DEBUG with verbose=True)
- Optional file handler: `<log_dir>/<run_id>.log`
"""

from __future__ import annotations
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(verbose: bool = False, log_dir: Optional[str] = None, run_id: Optional[str] = None) -> None:
    """
    Setup logging configuration.

    Args:
        verbose: Log DEBUG messages (construction parameters of every stage)
        log_dir: Directory for a log file (no file logging if None)
        run_id: Log file name stem (defaults to "text-analysis")
    """
    root = logging.getLogger("text_analysis")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # File
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, f"{run_id or 'text-analysis'}.log")
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)
