"""Shared logging configuration for rgb_gapfill.

Provides :func:`setup_logging` for consistent logging across scripts
and library modules.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: int = logging.INFO,
    *,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure the root logger with a consistent format.

    Safe to call multiple times; clears existing handlers first.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        fmt: Log message format string.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates.
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
