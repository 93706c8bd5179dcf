"""
Map-Airy distribution family implementation.

Contains the Map-Airy family (stable law with ``alpha = 3/2``, ``beta = 1``),
its parametrizations, its closed-form sampling strategy and the
:class:`MapAiryDistribution` façade handed out by the family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, TypeGuard, cast

import numpy as np

from pysatl_mapairy.approximation import (
    cdf_value,
    map_airy_variate,
    open_uniform,
    pdf_value,
    quantile_value,
)
from pysatl_mapairy.distributions.sampling import ArraySample
from pysatl_mapairy.distributions.strategies import (
    SamplingStrategy,
    check_sample_size,
    resolve_rng,
)
from pysatl_mapairy.distributions.support import REAL_LINE
from pysatl_mapairy.families.distribution import ParametricFamilyDistribution
from pysatl_mapairy.families.parametric_family import ParametricFamily
from pysatl_mapairy.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_mapairy.families.registry import ParametricFamilyRegister
from pysatl_mapairy.types import (
    CharacteristicName,
    ComplexArray,
    FamilyName,
    NumericArray,
    Tail,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_mapairy.distributions.distribution import Distribution
    from pysatl_mapairy.distributions.strategies import RandomSource

ALPHA = 1.5
"""Stability index of the family."""

BETA = 1.0
"""Skewness parameter of the family."""

MODE_BASE = -1.16158727113597068525
MEDIAN_BASE = -0.71671068545502205332
ENTROPY_BASE = 2.00727681841065634600

MAP_AIRY_DOC = """
Map-Airy distribution.

The Map-Airy distribution is the stable distribution with stability index
alpha = 3/2 and skewness beta = 1 (Nolan's S1 parametrization, location mu,
scale c). Its right tail decays like x^(-5/2) while its left tail decays like
exp(-2|x|^3 / 27); the mean is mu while variance, skewness and kurtosis are
infinite.

Characteristic function:
    phi(t) = exp(i mu t - |c t|^(3/2) (1 + i sign(t)))

No elementary closed form exists for the density; it is evaluated in double
precision from piecewise rational approximants.
"""


def _apply(kernel: Callable[[float], float], values: Any) -> float | NumericArray:
    """Evaluate a scalar kernel on a scalar (returning float) or element-wise on an array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        return kernel(float(arr))
    out = np.fromiter((kernel(float(v)) for v in arr.ravel()), dtype=np.float64, count=arr.size)
    return cast(NumericArray, out.reshape(arr.shape))


def _is_upper(tail: Tail | str) -> bool:
    """Map a tail selector to the evaluators' ``complementary`` flag."""
    return Tail(tail) is Tail.UPPER


def _is_real(value: object) -> TypeGuard[Real]:
    return isinstance(value, Real) and not isinstance(value, bool)


def _pow3d2(x: float) -> float:
    return x * math.sqrt(x)


def _pow2d3(x: float) -> float:
    root = math.cbrt(x)
    return root * root


def configure_map_airy_family() -> None:
    """
    Configure and register the Map-Airy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MAP_AIRY):
        return

    def pdf(parameters: Parametrization, x: NumericArray) -> float | NumericArray:
        """
        Probability density function of the Map-Airy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - c: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        float or NumericArray
            Density values; NaN where ``x`` is NaN and 0 at infinities
        """
        parameters = cast(_LocScale, parameters)
        mu, c_inv = parameters.mu, parameters.c_inv

        return _apply(lambda v: pdf_value((v - mu) * c_inv) * c_inv, x)

    def cdf(
        parameters: Parametrization, x: NumericArray, tail: Tail | str = Tail.LOWER
    ) -> float | NumericArray:
        """
        Cumulative distribution function of the Map-Airy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - c: float (scale)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function
        tail : Tail or str, default Tail.LOWER
            ``Tail.LOWER`` for P(X <= x), ``Tail.UPPER`` for P(X > x)

        Returns
        -------
        float or NumericArray
            Probabilities for each point x; NaN where ``x`` is NaN

        Raises
        ------
        ValueError
            If ``tail`` is not a valid tail name
        """
        parameters = cast(_LocScale, parameters)
        mu, c_inv = parameters.mu, parameters.c_inv
        complementary = _is_upper(tail)

        return _apply(lambda v: cdf_value((v - mu) * c_inv, complementary), x)

    def sf(parameters: Parametrization, x: NumericArray) -> float | NumericArray:
        """Survival function P(X > x) of the Map-Airy distribution."""
        return cdf(parameters, x, tail=Tail.UPPER)

    def ppf(
        parameters: Parametrization, p: NumericArray, tail: Tail | str = Tail.LOWER
    ) -> float | NumericArray:
        """
        Percent point function (inverse CDF) of the Map-Airy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - c: float (scale)
        p : NumericArray
            Probability from [0, 1]
        tail : Tail or str, default Tail.LOWER
            Tail the probability refers to

        Returns
        -------
        float or NumericArray
            Quantiles corresponding to probabilities p. Probabilities outside
            [0, 1] (and NaN) give NaN; the extreme lower quantile saturates
            to -inf and the extreme upper quantile to +inf
        """
        parameters = cast(_LocScale, parameters)
        mu, c = parameters.mu, parameters.c
        complementary = _is_upper(tail)

        return _apply(lambda q: mu + c * quantile_value(q, complementary), p)

    def char_func(parameters: Parametrization, t: NumericArray) -> ComplexArray:
        """
        Characteristic function of the Map-Airy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - c: float (scale)
        t : NumericArray
            Points at which to evaluate the characteristic function

        Returns
        -------
        ComplexArray
            Characteristic function values at points t
        """
        parameters = cast(_LocScale, parameters)

        t = np.asarray(t, dtype=np.float64)
        magnitude = np.abs(parameters.c * t) ** ALPHA
        return cast(
            ComplexArray,
            np.exp(1j * parameters.mu * t - magnitude * (1.0 + 1j * np.sign(t))),
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Map-Airy distribution."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of Map-Airy distribution."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu + MEDIAN_BASE * parameters.c

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of Map-Airy distribution."""
        parameters = cast(_LocScale, parameters)
        return parameters.mu + MODE_BASE * parameters.c

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy of Map-Airy distribution (in nats)."""
        parameters = cast(_LocScale, parameters)
        return ENTROPY_BASE + math.log(parameters.c)

    def var_func(_1: Parametrization, _2: Any) -> float:
        """Variance of Map-Airy distribution (infinite, reported as NaN)."""
        return math.nan

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of Map-Airy distribution (undefined, reported as NaN)."""
        return math.nan

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of Map-Airy distribution (undefined, NaN either way)."""
        return math.nan

    MapAiry = ParametricFamily(
        name=FamilyName.MAP_AIRY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locScale", "nolanS0"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.CF: char_func,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        sampling_strategy=MapAirySamplingStrategy(),
        support=REAL_LINE,
        distribution_class=MapAiryDistribution,
    )
    MapAiry.__doc__ = MAP_AIRY_DOC

    @parametrization(family=MapAiry, name="locScale")
    class _LocScale(Parametrization):
        """
        Standard (S1) parametrization of Map-Airy distribution.

        Parameters
        ----------
        mu : float
            Location; equals the mean of the distribution
        c : float
            Scale of the distribution
        """

        mu: float
        c: float
        c_inv: float = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            object.__setattr__(self, "c_inv", 1.0 / self.c if self.c != 0 else math.inf)

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            """Check that location is finite."""
            return math.isfinite(self.mu)

        @constraint(description="c > 0")
        def check_c_positive(self) -> bool:
            """Check that scale is positive."""
            return self.c > 0

        @constraint(description="c is finite")
        def check_c_finite(self) -> bool:
            """Check that scale is finite."""
            return math.isfinite(self.c)

    @parametrization(family=MapAiry, name="nolanS0")
    class _NolanS0(Parametrization):
        """
        Nolan's S0 parametrization of Map-Airy distribution.

        The S0 location is continuous in (alpha, beta); for alpha = 3/2 and
        beta = 1 it relates to the S1 location by mu = delta + gamma.

        Parameters
        ----------
        delta : float
            S0 location
        gamma : float
            Scale (identical to c)
        """

        delta: float
        gamma: float

        @constraint(description="delta is finite")
        def check_delta_finite(self) -> bool:
            """Check that location is finite."""
            return math.isfinite(self.delta)

        @constraint(description="gamma > 0")
        def check_gamma_positive(self) -> bool:
            """Check that scale is positive."""
            return self.gamma > 0

        @constraint(description="gamma is finite")
        def check_gamma_finite(self) -> bool:
            """Check that scale is finite."""
            return math.isfinite(self.gamma)

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _LocScale(mu=self.delta + self.gamma, c=self.gamma)

    ParametricFamilyRegister.register(MapAiry)


class MapAirySamplingStrategy(SamplingStrategy):
    """
    Closed-form sampler for the Map-Airy family.

    Each variate is built from two independent open uniforms through
    :func:`~pysatl_mapairy.approximation.map_airy_variate`; no rejection or
    iteration is involved.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        check_sample_size(n)
        rng = resolve_rng(options.pop("rng", None))
        params = cast(ParametricFamilyDistribution, distr).base_parameters
        mu, c = params.parameters["mu"], params.parameters["c"]

        u = open_uniform(rng, n) - 0.5
        w = open_uniform(rng, n)
        values = mu + c * map_airy_variate(u, w)
        return ArraySample(np.asarray(values, dtype=np.float64).reshape(n, 1))


@dataclass(slots=True, eq=True, repr=False)
class MapAiryDistribution(ParametricFamilyDistribution):
    """
    A Map-Airy distribution with fixed location and scale.

    Instances are created by the registered family (``family(mu=..., c=...)``)
    or by :func:`map_airy`, and are never mutated: every algebraic operation
    returns a new instance.

    Notes
    -----
    - Sums and differences of independent Map-Airy variables are Map-Airy with
      ``mu = mu1 +/- mu2`` and ``c = (c1**1.5 + c2**1.5)**(2/3)``.
    - Scaling by ``k <= 0`` produces a non-positive scale and is rejected
      with ``ValueError`` by parameter validation.
    """

    @property
    def mu(self) -> float:
        """Location parameter."""
        return float(self.base_parameters.parameters["mu"])

    @property
    def c(self) -> float:
        """Scale parameter."""
        return float(self.base_parameters.parameters["c"])

    @property
    def alpha(self) -> float:
        """Stability index (fixed at 3/2)."""
        return ALPHA

    @property
    def beta(self) -> float:
        """Skewness parameter (fixed at 1)."""
        return BETA

    @property
    def mean(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    @property
    def median(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.MEDIAN, None))

    @property
    def mode(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.MODE, None))

    @property
    def entropy(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.ENTROPY, None))

    @property
    def variance(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.VAR, None))

    @property
    def skewness(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.SKEW, None))

    @property
    def kurtosis(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.KURT, None))

    def pdf(self, x: Any) -> float | NumericArray:
        """Density at ``x`` (scalar or array)."""
        density = self.calculate_characteristic(CharacteristicName.PDF, x)
        return cast("float | NumericArray", density)

    def cdf(self, x: Any, tail: Tail | str = Tail.LOWER) -> float | NumericArray:
        """Probability ``P(X <= x)`` (lower tail) or ``P(X > x)`` (upper tail)."""
        return cast(
            "float | NumericArray",
            self.calculate_characteristic(CharacteristicName.CDF, x, tail=tail),
        )

    def quantile(self, p: Any, tail: Tail | str = Tail.LOWER) -> float | NumericArray:
        """Inverse of :meth:`cdf` for the same tail; NaN for ``p`` outside ``[0, 1]``."""
        return cast(
            "float | NumericArray",
            self.calculate_characteristic(CharacteristicName.PPF, p, tail=tail),
        )

    def sample_one(self, rng: RandomSource = None) -> float:
        """Draw a single variate."""
        return float(self.sample(1, rng=rng).array[0, 0])

    def combine(self, other: MapAiryDistribution) -> MapAiryDistribution:
        """Distribution of the sum of independent variables from ``self`` and ``other``."""
        return self._new(self.mu + other.mu, self._combined_scale(other))

    def difference(self, other: MapAiryDistribution) -> MapAiryDistribution:
        """Stable-sum combination with the locations subtracted."""
        return self._new(self.mu - other.mu, self._combined_scale(other))

    def shift(self, s: float) -> MapAiryDistribution:
        """Distribution of ``X + s``."""
        return self._new(self.mu + s, self.c)

    def scale(self, k: float) -> MapAiryDistribution:
        """
        Distribution of ``k * X``.

        Raises
        ------
        ValueError
            If ``k <= 0`` (the resulting scale violates ``c > 0``).
        """
        return self._new(self.mu * k, self.c * k)

    def _combined_scale(self, other: MapAiryDistribution) -> float:
        return _pow2d3(_pow3d2(self.c) + _pow3d2(other.c))

    def _new(self, mu: float, c: float) -> MapAiryDistribution:
        return cast(MapAiryDistribution, self.family(mu=mu, c=c))

    def __add__(self, other: object) -> MapAiryDistribution:
        if isinstance(other, MapAiryDistribution):
            return self.combine(other)
        if _is_real(other):
            return self.shift(float(other))
        return NotImplemented

    def __radd__(self, other: object) -> MapAiryDistribution:
        if _is_real(other):
            return self.shift(float(other))
        return NotImplemented

    def __sub__(self, other: object) -> MapAiryDistribution:
        if isinstance(other, MapAiryDistribution):
            return self.difference(other)
        if _is_real(other):
            return self.shift(-float(other))
        return NotImplemented

    def __mul__(self, other: object) -> MapAiryDistribution:
        if _is_real(other):
            return self.scale(float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> MapAiryDistribution:
        if _is_real(other):
            if other == 0:
                raise ValueError("Cannot divide a distribution by zero.")
            return self._new(self.mu / float(other), self.c / float(other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mu={self.mu}, c={self.c})"


def map_airy(mu: float = 0.0, c: float = 1.0) -> MapAiryDistribution:
    """
    Create a Map-Airy distribution in the standard parametrization.

    Registers the built-in families on first use.

    Raises
    ------
    ValueError
        If ``mu`` is not finite or ``c`` is not finite and positive.
    """
    from pysatl_mapairy.families.configuration import configure_families_register

    family = configure_families_register().get(FamilyName.MAP_AIRY)
    return cast(MapAiryDistribution, family(mu=mu, c=c))
