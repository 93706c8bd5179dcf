"""
Rational Approximant Evaluation
===============================

Every approximation branch of the Map-Airy evaluators reduces to a ratio of
two polynomials fitted on a bounded sub-range. This module holds the table
container and the shared Horner kernel.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class PadeTable:
    """
    Coefficients of a rational approximant.

    Parameters
    ----------
    numer : tuple[float, ...]
        Numerator coefficients in increasing power order.
    denom : tuple[float, ...]
        Denominator coefficients in increasing power order. The constant
        term is 1 for every shipped table.
    """

    numer: tuple[float, ...]
    denom: tuple[float, ...]


def horner(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate ``sum(c[i] * x**i)`` by nested multiplication."""
    if not coefficients:
        return 0.0
    acc = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        acc = acc * x + coefficient
    return acc


def pade(x: float, table: PadeTable) -> float:
    """
    Evaluate the rational function described by ``table`` at ``x``.

    The caller is responsible for keeping ``x`` inside the range the table
    was fitted on.
    """
    return horner(x, table.numer) / horner(x, table.denom)
