"""
Sampling Interfaces
===================

Sample container protocol and the array-backed container the sampling
strategies return.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    type FloatArray = npt.NDArray[np.floating[Any]]


class Sample(Protocol):
    """Sample container: ``n`` observations stored as rows of an array."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample stored as a ``float64`` array of shape ``(n, d)``.

    Parameters
    ----------
    data : array_like
        Two-dimensional data, one observation per row.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    data: FloatArray

    def __init__(self, data: npt.ArrayLike) -> None:
        arr = np.asarray(data, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = arr

    def __len__(self) -> int:
        return int(self.data.shape[0])

    @property
    def array(self) -> FloatArray:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)
