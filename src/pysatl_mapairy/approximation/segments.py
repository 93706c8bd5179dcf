"""
Segment Dispatch
================

Partition of an evaluation domain into consecutive segments, each served by
its own rational approximant:

- :class:`Segment`: an interval ``[lower, upper]`` bound to a table and to the
  shift rule that maps the input into the table's fitted range.
- :class:`SegmentChain`: an ordered, gap-free chain of segments with
  binary-search lookup on the right endpoints.
- :class:`ExponentBucket`: a probability bucket ``[2**min_exponent, ...)``
  evaluated in the variable ``-log2(p * 2**scale)``.

Notes
-----
- Right endpoints are inclusive: a value equal to a breakpoint is served by
  the segment on its left.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_mapairy.approximation.pade import pade

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pysatl_mapairy.approximation.pade import PadeTable


@dataclass(frozen=True, slots=True)
class Segment:
    """
    One approximation segment.

    Parameters
    ----------
    lower, upper : float
        Segment endpoints.
    table : PadeTable
        Approximant fitted on the segment.
    reflected : bool, default False
        If ``True`` the table is evaluated at ``upper - x`` instead of
        ``x - lower``.
    """

    lower: float
    upper: float
    table: PadeTable
    reflected: bool = False

    def __call__(self, x: float) -> float:
        return pade(self.upper - x if self.reflected else x - self.lower, self.table)

    @property
    def label(self) -> str:
        return f"[{self.lower:g}, {self.upper:g}]"


@dataclass(frozen=True, slots=True)
class SegmentChain:
    """
    Ordered chain of adjacent segments.

    Parameters
    ----------
    segments : tuple[Segment, ...]
        Segments sorted by position; each one starts where the previous ends.

    Raises
    ------
    ValueError
        If the chain is empty or has a gap or overlap.
    """

    segments: tuple[Segment, ...]
    _breaks: tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("SegmentChain expects at least one segment.")
        for left, right in zip(self.segments, self.segments[1:], strict=False):
            if left.upper != right.lower:
                raise ValueError(f"Segments {left.label} and {right.label} are not adjacent.")
        object.__setattr__(self, "_breaks", tuple(s.upper for s in self.segments))

    @classmethod
    def from_breakpoints(
        cls, breakpoints: Iterable[float], tables: Iterable[PadeTable], reflected: bool = False
    ) -> SegmentChain:
        """Build a chain from ``n + 1`` breakpoints and ``n`` tables."""
        points = tuple(breakpoints)
        fitted = tuple(tables)
        if len(points) != len(fitted) + 1:
            raise ValueError("Expected exactly one more breakpoint than tables.")
        return cls(
            tuple(
                Segment(lo, hi, table, reflected)
                for lo, hi, table in zip(points[:-1], points[1:], fitted, strict=True)
            )
        )

    @property
    def lower(self) -> float:
        return self.segments[0].lower

    @property
    def upper(self) -> float:
        return self.segments[-1].upper

    def find(self, x: float) -> Segment | None:
        """
        Return the segment containing ``x``, or ``None`` beyond the chain.

        ``x`` is assumed to be at least :attr:`lower`.
        """
        index = bisect_left(self._breaks, x)
        if index == len(self.segments):
            return None
        return self.segments[index]

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


def ilogb(x: float) -> int:
    """
    Unbiased binary exponent of ``x`` (``floor(log2(x))`` for ``x > 0``).

    Exact for subnormal inputs. Zero maps to ``-2**31`` so that it falls
    below every bucket.
    """
    if x == 0.0:
        return -(2**31)
    return math.frexp(x)[1] - 1


@dataclass(frozen=True, slots=True)
class ExponentBucket:
    """
    Probability bucket selected by binary exponent.

    Parameters
    ----------
    min_exponent : int
        Smallest ``ilogb(p)`` served by the bucket.
    scale : int
        Power of two applied before taking ``-log2``.
    table : PadeTable
        Approximant fitted in the transformed variable.
    """

    min_exponent: int
    scale: int
    table: PadeTable

    def __call__(self, p: float) -> float:
        return pade(-math.log2(math.ldexp(p, self.scale)), self.table)

    @property
    def label(self) -> str:
        return f"[2^{self.min_exponent}, 2^{-self.scale})"


def find_bucket(buckets: tuple[ExponentBucket, ...], p: float) -> ExponentBucket | None:
    """Return the first bucket whose ``min_exponent`` admits ``p``, else ``None``."""
    exponent = ilogb(p)
    for bucket in buckets:
        if exponent >= bucket.min_exponent:
            return bucket
    return None
