"""
Map-Airy Tail Probability Evaluator
===================================

Tail masses of the standard Map-Airy law over the same segment layout as the
density:

- :func:`plus_value`: upper-tail mass ``P(X > u)`` for ``u >= 0``; beyond
  64 it follows ``w * R(w)`` with ``w = u**-1.5``.
- :func:`minus_value`: lower-tail mass ``P(X < -v)`` for ``v >= 0``; on
  ``(2, 32]`` it carries the factor ``exp(-2 v**3 / 27) / v`` and is exactly
  zero beyond 32.

The opposite tail on each side is obtained as a complement, so
lower + upper equals one up to rounding.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_mapairy.approximation.instrumentation import report_segment
from pysatl_mapairy.approximation.pade import pade
from pysatl_mapairy.approximation.segments import SegmentChain
from pysatl_mapairy.approximation.tables import cdf as tables

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
    """Upper-tail mass beyond ``u >= 0``."""
    if math.isinf(u):
        return 0.0

    segment = PLUS_SEGMENTS.find(u)
    if segment is not None:
        report_segment("cdf", "plus", segment.label)
        return segment(u)

    report_segment("cdf", "plus", "limit")
    w = 1.0 / (u * math.sqrt(u))
    return pade(w, tables.PLUS_LIMIT) * w


def minus_value(v: float) -> float:
    """Lower-tail mass below ``-v`` for ``v >= 0``."""
    segment = MINUS_NEAR_SEGMENTS.find(v)
    if segment is not None:
        report_segment("cdf", "minus", segment.label)
        return segment(v)

    segment = MINUS_TAIL_SEGMENTS.find(v)
    if segment is None:
        report_segment("cdf", "minus", "underflow")
        return 0.0

    report_segment("cdf", "minus", segment.label)
    return segment(v) * math.exp(-(2.0 * v * v * v) / 27.0) / v


def cdf_value(u: float, complementary: bool) -> float:
    """
    Standard Map-Airy tail probability at ``u``.

    Parameters
    ----------
    u : float
        Normalised abscissa ``(x - mu) / c``.
    complementary : bool
        ``False`` for ``P(X <= u)``, ``True`` for ``P(X > u)``.

    Returns
    -------
    float
        Probability in ``[0, 1]``; NaN for NaN input.
    """
    if math.isnan(u):
        return math.nan
    if u >= 0.0:
        upper = plus_value(u)
        return upper if complementary else 1.0 - upper
    lower = minus_value(-u)
    return 1.0 - lower if complementary else lower
