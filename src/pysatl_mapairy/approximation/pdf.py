"""
Map-Airy Density Evaluator
==========================

Density of the standard Map-Airy law (``mu = 0``, ``c = 1``) at a normalised
abscissa ``u``.

- ``u >= 0``: doubling segments up to 64, then the power-law tail
  ``w * R(w) / u`` with ``w = u**-1.5`` (density decays like ``u**-2.5``).
- ``u < 0``: two direct segments on ``[-2, 0]``, then
  ``R(v) * sqrt(v) * exp(-2 v**3 / 27)`` for ``v = -u`` up to 32, and an
  exact zero beyond (the true value is below the smallest subnormal).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_mapairy.approximation.instrumentation import report_segment
from pysatl_mapairy.approximation.pade import pade
from pysatl_mapairy.approximation.segments import SegmentChain
from pysatl_mapairy.approximation.tables import pdf as tables

PLUS_SEGMENTS = SegmentChain.from_breakpoints(
    (0.0, 1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 64.0),
    (
        tables.PLUS_0_1,
        tables.PLUS_1_2,
        tables.PLUS_2_4,
        tables.PLUS_4_8,
        tables.PLUS_8_16,
        tables.PLUS_16_32,
        tables.PLUS_32_64,
    ),
)

MINUS_NEAR_SEGMENTS = SegmentChain.from_breakpoints(
    (0.0, 1.0, 2.0),
    (tables.MINUS_1_0, tables.MINUS_2_1),
    reflected=True,
)

MINUS_TAIL_SEGMENTS = SegmentChain.from_breakpoints(
    (2.0, 4.0, 8.0, 16.0, 32.0),
    (tables.MINUS_2_4, tables.MINUS_4_8, tables.MINUS_8_16, tables.MINUS_16_32),
)


def plus_value(u: float) -> float:
    """Density at ``u >= 0``."""
    segment = PLUS_SEGMENTS.find(u)
    if segment is not None:
        report_segment("pdf", "plus", segment.label)
        return segment(u)

    report_segment("pdf", "plus", "limit")
    w = 1.0 / (u * math.sqrt(u))
    return pade(w, tables.PLUS_LIMIT) * w / u


def minus_value(v: float) -> float:
    """Density at ``u = -v`` for ``v >= 0``."""
    segment = MINUS_NEAR_SEGMENTS.find(v)
    if segment is not None:
        report_segment("pdf", "minus", segment.label)
        return segment(v)

    segment = MINUS_TAIL_SEGMENTS.find(v)
    if segment is None:
        report_segment("pdf", "minus", "underflow")
        return 0.0

    report_segment("pdf", "minus", segment.label)
    return segment(v) * math.sqrt(v) * math.exp(-(2.0 * v * v * v) / 27.0)


def pdf_value(u: float) -> float:
    """
    Standard Map-Airy density at ``u``.

    Parameters
    ----------
    u : float
        Normalised abscissa ``(x - mu) / c``.

    Returns
    -------
    float
        Density value; NaN for NaN input and ``0.0`` for infinite input.
    """
    if math.isnan(u):
        return math.nan
    if math.isinf(u):
        return 0.0
    if u >= 0.0:
        return plus_value(u)
    return minus_value(-u)
