"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves the analytical
  characteristics a distribution provides.
- :class:`SamplingStrategy` — draws samples from a distribution.

Notes
-----
- Strategies are stateless; random state is supplied per call through the
  ``rng`` option.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_mapairy.distributions.computation import AnalyticalComputation
from pysatl_mapairy.types import GenericCharacteristicName

from .sampling import Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]

type RandomSource = np.random.Generator | int | None
"""Anything accepted by :func:`numpy.random.default_rng`."""


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return ``rng`` if it is a generator, otherwise seed a fresh one from it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def check_sample_size(n: int) -> None:
    """
    Validate a requested sample size.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Sample size must be non-negative, got {n}.")


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution provides for the
    requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution provides no analytical implementation for the
        requested characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for protocol compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        available = ", ".join(sorted(computations)) or "none"
        raise RuntimeError(
            f"Characteristic '{state}' is not provided by the distribution "
            f"(available: {available})."
        )


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...
