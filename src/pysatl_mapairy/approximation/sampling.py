"""
Map-Airy Variate Transform
==========================

Closed-form construction of standard Map-Airy variates from two independent
uniforms (Chambers-Mallows-Stuck form for ``alpha = 3/2``, ``beta = 1``):

    r = -sin(pi (1.5 u - 0.25)) * cbrt(2 ln(w) / (cos(pi (0.5 u - 0.25)) cos(pi u)**2))

with ``u`` uniform on ``(-0.5, 0.5)`` and ``w`` uniform on ``(0, 1)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    type FloatArray = npt.NDArray[np.floating[Any]]


@overload
def map_airy_variate(u: float, w: float) -> float: ...
@overload
def map_airy_variate(u: FloatArray, w: FloatArray) -> FloatArray: ...


def map_airy_variate(u: float | FloatArray, w: float | FloatArray) -> float | FloatArray:
    """
    Transform uniforms ``(u, w)`` into standard Map-Airy variates.

    Parameters
    ----------
    u : float or numpy.ndarray
        Uniform variate(s) on the open interval ``(-0.5, 0.5)``.
    w : float or numpy.ndarray
        Uniform variate(s) on the open interval ``(0, 1)``.

    Returns
    -------
    float or numpy.ndarray
        Variate(s) of the standard law; the output is a Python float when both
        inputs are scalars.
    """
    u_arr = np.asarray(u, dtype=np.float64)
    w_arr = np.asarray(w, dtype=np.float64)

    cu = np.cos(np.pi * u_arr)
    r = -np.sin(np.pi * (1.5 * u_arr - 0.25)) * np.cbrt(
        2.0 * np.log(w_arr) / (np.cos(np.pi * (0.5 * u_arr - 0.25)) * cu * cu)
    )

    if np.ndim(r) == 0:
        return float(r)
    return r


def open_uniform(rng: np.random.Generator, size: int) -> FloatArray:
    """
    Draw ``size`` uniforms on the open interval ``(0, 1)``.

    ``Generator.random`` samples ``[0, 1)``; exact zeros are redrawn.
    """
    values = rng.random(size)
    zeros = values == 0.0
    while np.any(zeros):
        values[zeros] = rng.random(int(np.count_nonzero(zeros)))
        zeros = values == 0.0
    return values
