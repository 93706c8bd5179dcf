"""
Core Type Definitions
=====================

Names, enumerations and small value types shared by the family framework,
the approximation engine and the Map-Airy family.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Kind of a distribution; only continuous laws are modelled."""

    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType:
    """
    Descriptor of a distribution on a Euclidean space.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Dimension of the space the variates live in.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type of the Map-Airy family."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
ComplexArray = NDArray[np.complexfloating[Any]]
BoolArray = NDArray[np.bool_]


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval on the real line.

    Infinite endpoints are always open, whatever closure flag is passed.

    Parameters
    ----------
    left : float, default=-inf
    right : float, default=inf
    left_closed : bool, default=True
    right_closed : bool, default=True
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test for a point or, element-wise, for an array.

        NaN is never contained.
        """
        arr = np.asarray(x)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = above & below

        if np.ndim(arr) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


type GenericCharacteristicName = str
"""Characteristic name as used in lookups (e.g. ``"pdf"``)."""

type ParametrizationName = str
"""Parametrization name as registered in a family."""


class Tail(StrEnum):
    """
    Tail selector for cumulative probabilities and quantiles.

    Attributes
    ----------
    LOWER : str
        ``P(X <= x)`` and its inverse.
    UPPER : str
        ``P(X > x)`` and its inverse.
    """

    LOWER = "lower"
    UPPER = "upper"


class CharacteristicName(StrEnum):
    """Names of the characteristics the Map-Airy family provides analytically."""

    PDF = "pdf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    CF = "cf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    MAP_AIRY = "MapAiry"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "BoolArray",
    "ComplexArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "Tail",
    "CharacteristicName",
    "FamilyName",
]
