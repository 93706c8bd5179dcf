"""
Map-Airy Quantile Evaluator
===========================

Inverse of the standard Map-Airy tail probabilities. Only ``p <= 0.5`` is
approximated directly; larger probabilities are reflected onto the opposite
tail.

- Upper branch (large positive abscissa): direct segments on
  ``[0.125, 0.5]``, exponent buckets down to ``2**-48``, then the leading
  power-law coefficient ``1 / cbrt(2 pi)``; the bucket value is divided by
  ``p**(2/3)``.
- Lower branch (large negative abscissa): direct segments on
  ``[0.125, 0.5]`` and exponent buckets down to ``2**-1024``; below that the
  quantile is ``-inf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import cast

from pysatl_mapairy.approximation.instrumentation import report_segment
from pysatl_mapairy.approximation.segments import (
    ExponentBucket,
    Segment,
    SegmentChain,
    find_bucket,
)
from pysatl_mapairy.approximation.tables import quantile as tables

UPPER_LIMIT_COEFFICIENT = 1.0 / math.cbrt(2.0 * math.pi)
"""Limit of ``x * p**(2/3)`` as the upper-tail probability ``p`` goes to zero."""

DIRECT_LOWER_BOUND = 0.125

UPPER_SEGMENTS = SegmentChain.from_breakpoints(
    (0.125, 0.25, 0.5),
    (tables.UPPER_0P125_0P25, tables.UPPER_0P25_0P5),
)

UPPER_BUCKETS = (
    ExponentBucket(-4, 3, tables.UPPER_EXPM3_4),
    ExponentBucket(-8, 4, tables.UPPER_EXPM4_8),
    ExponentBucket(-16, 8, tables.UPPER_EXPM8_16),
    ExponentBucket(-32, 16, tables.UPPER_EXPM16_32),
    ExponentBucket(-48, 32, tables.UPPER_EXPM32_48),
)

LOWER_SEGMENTS = SegmentChain.from_breakpoints(
    (0.125, 0.25, 0.375, 0.5),
    (tables.LOWER_0P125_0P25, tables.LOWER_0P25_0P375, tables.LOWER_0P375_0P5),
)

LOWER_BUCKETS = (
    ExponentBucket(-4, 3, tables.LOWER_EXPM3_4),
    ExponentBucket(-8, 4, tables.LOWER_EXPM4_8),
    ExponentBucket(-16, 8, tables.LOWER_EXPM8_16),
    ExponentBucket(-32, 16, tables.LOWER_EXPM16_32),
    ExponentBucket(-64, 32, tables.LOWER_EXPM32_64),
    ExponentBucket(-128, 64, tables.LOWER_EXPM64_128),
    ExponentBucket(-256, 128, tables.LOWER_EXPM128_256),
    ExponentBucket(-512, 256, tables.LOWER_EXPM256_512),
    ExponentBucket(-1024, 512, tables.LOWER_EXPM512_1024),
)


def upper_value(p: float) -> float:
    """Abscissa whose upper-tail mass is ``p``, for ``0 <= p <= 0.5``."""
    if p >= DIRECT_LOWER_BOUND:
        segment = cast(Segment, UPPER_SEGMENTS.find(p))
        report_segment("quantile", "upper", segment.label)
        return segment(p)

    if p == 0.0:
        return math.inf

    bucket = find_bucket(UPPER_BUCKETS, p)
    if bucket is None:
        report_segment("quantile", "upper", "limit")
        v = UPPER_LIMIT_COEFFICIENT
    else:
        report_segment("quantile", "upper", bucket.label)
        v = bucket(p)

    # cbrt first: p * p underflows below 1e-154
    root = math.cbrt(p)
    return v / (root * root)


def lower_value(p: float) -> float:
    """Abscissa whose lower-tail mass is ``p``, for ``0 <= p <= 0.5``."""
    if p >= DIRECT_LOWER_BOUND:
        segment = cast(Segment, LOWER_SEGMENTS.find(p))
        report_segment("quantile", "lower", segment.label)
        return segment(p)

    bucket = find_bucket(LOWER_BUCKETS, p)
    if bucket is None:
        report_segment("quantile", "lower", "underflow")
        return -math.inf

    report_segment("quantile", "lower", bucket.label)
    return bucket(p)


def quantile_value(p: float, complementary: bool) -> float:
    """
    Standard Map-Airy quantile.

    Parameters
    ----------
    p : float
        Probability.
    complementary : bool
        ``False`` for the lower-tail quantile (``P(X <= x) = p``), ``True``
        for the upper-tail quantile (``P(X > x) = p``).

    Returns
    -------
    float
        Normalised abscissa; NaN if ``p`` is outside ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        return math.nan
    if p > 0.5:
        return quantile_value(1.0 - p, not complementary)
    return upper_value(p) if complementary else lower_value(p)
