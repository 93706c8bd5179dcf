"""
Segment Instrumentation
=======================

Optional hook reporting which approximation segment served an evaluation.
Nothing is reported unless a hook is installed with :func:`set_segment_hook`.

Notes
-----
- The hook is process-wide; install it once at start-up (or inside a test)
  rather than toggling it from concurrent threads.
- :func:`log_segment` is a ready-made hook emitting ``logging`` DEBUG records.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

type SegmentHook = Callable[[str, str, str], None]
"""Hook signature: ``hook(function, branch, segment)``."""

_hook: SegmentHook | None = None


def set_segment_hook(hook: SegmentHook | None) -> SegmentHook | None:
    """
    Install ``hook`` (or remove the current one with ``None``).

    Returns
    -------
    SegmentHook or None
        The previously installed hook, so callers can restore it.
    """
    global _hook
    previous = _hook
    _hook = hook
    return previous


def get_segment_hook() -> SegmentHook | None:
    """Return the currently installed hook."""
    return _hook


def report_segment(function: str, branch: str, segment: str) -> None:
    """Forward a segment selection to the installed hook, if any."""
    if _hook is not None:
        _hook(function, branch, segment)


def log_segment(function: str, branch: str, segment: str) -> None:
    """Hook that logs every segment selection at DEBUG level."""
    logger.debug("%s %s segment %s", function, branch, segment)
