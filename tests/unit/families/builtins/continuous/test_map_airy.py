"""
Tests for Map-Airy Distribution Family

This module tests the functionality of the Map-Airy distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_mapairy.approximation import cdf_value, pdf_value, quantile_value
from pysatl_mapairy.distributions.support import REAL_LINE
from pysatl_mapairy.families import MapAiryDistribution, map_airy
from pysatl_mapairy.families.builtins.continuous.map_airy import (
    ENTROPY_BASE,
    MEDIAN_BASE,
    MODE_BASE,
)
from pysatl_mapairy.families.configuration import configure_families_register
from pysatl_mapairy.types import (
    CharacteristicName,
    FamilyName,
    Tail,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestMapAiryFamily(BaseDistributionTest):
    """Test suite for Map-Airy distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.map_airy_family = registry.get(FamilyName.MAP_AIRY)
        self.map_airy_dist_example = self.map_airy_family(mu=2.0, c=1.5)

    def test_family_properties(self):
        """Test basic properties of Map-Airy family."""
        assert self.map_airy_family.name == FamilyName.MAP_AIRY

        # Check parameterizations
        expected_parametrizations = {"locScale", "nolanS0"}
        assert set(self.map_airy_family.parametrization_names) == expected_parametrizations
        assert self.map_airy_family.base_parametrization_name == "locScale"
        assert "Map-Airy distribution" in (self.map_airy_family.__doc__ or "")

    def test_loc_scale_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.map_airy_family(mu=2.0, c=1.5)

        assert isinstance(dist, MapAiryDistribution)
        assert dist.family_name == FamilyName.MAP_AIRY
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"mu": 2.0, "c": 1.5}
        assert dist.parametrization_name == "locScale"
        assert dist.mu == 2.0
        assert dist.c == 1.5
        assert dist.alpha == 1.5
        assert dist.beta == 1.0

    def test_reciprocal_scale_is_cached(self):
        """Test that the reciprocal scale is derived once and hidden from parameters."""
        params = self.map_airy_dist_example.parameters
        assert params.c_inv == pytest.approx(1.0 / 1.5)
        assert "c_inv" not in params.parameters

    def test_nolan_s0_parametrization_creation(self):
        """Test creation of distribution with Nolan's S0 parametrization."""
        dist = self.map_airy_family(delta=0.5, gamma=1.5, parametrization_name="nolanS0")

        assert isinstance(dist, MapAiryDistribution)
        assert dist.parameters.parameters == {"delta": 0.5, "gamma": 1.5}
        assert dist.parametrization_name == "nolanS0"
        assert dist.mu == pytest.approx(2.0)
        assert dist.c == pytest.approx(1.5)

    def test_nolan_s0_matches_loc_scale(self):
        """Test that both parametrizations describe the same law."""
        s0 = self.map_airy_family(delta=0.5, gamma=1.5, parametrization_name="nolanS0")
        xs = np.array([-3.0, 0.0, 2.0, 10.0])

        self.assert_arrays_relatively_equal(s0.pdf(xs), self.map_airy_dist_example.pdf(xs))
        self.assert_arrays_relatively_equal(s0.cdf(xs), self.map_airy_dist_example.cdf(xs))
        assert s0.median == pytest.approx(self.map_airy_dist_example.median)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"mu": math.nan, "c": 1.0}, "mu is finite"),
            ({"mu": math.inf, "c": 1.0}, "mu is finite"),
            ({"mu": 0.0, "c": 0.0}, "c > 0"),
            ({"mu": 0.0, "c": -1.0}, "c > 0"),
            ({"mu": 0.0, "c": math.nan}, "c > 0"),
            ({"mu": 0.0, "c": math.inf}, "c is finite"),
        ],
    )
    def test_parametrization_constraints(self, params, message):
        """Test parameter constraints validation."""
        with pytest.raises(ValueError, match=message):
            self.map_airy_family(**params)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"delta": math.nan, "gamma": 1.0}, "delta is finite"),
            ({"delta": 0.0, "gamma": -2.0}, "gamma > 0"),
            ({"delta": 0.0, "gamma": math.inf}, "gamma is finite"),
            ({"delta": 1e308, "gamma": 1e308}, "mu is finite"),
        ],
    )
    def test_nolan_s0_constraints(self, params, message):
        """Test S0 constraints and validation of the converted parameters."""
        with pytest.raises(ValueError, match=message):
            self.map_airy_family(parametrization_name="nolanS0", **params)

    def test_analytical_computations_availability(self):
        """Test that analytical computations are available for Map-Airy distribution."""
        comp = self.map_airy_family(mu=0.0, c=1.0).analytical_computations

        expected_chars = {
            CharacteristicName.PDF,
            CharacteristicName.CDF,
            CharacteristicName.SF,
            CharacteristicName.PPF,
            CharacteristicName.CF,
            CharacteristicName.MEAN,
            CharacteristicName.MEDIAN,
            CharacteristicName.MODE,
            CharacteristicName.ENTROPY,
            CharacteristicName.VAR,
            CharacteristicName.SKEW,
            CharacteristicName.KURT,
        }
        assert set(comp) == expected_chars

    @pytest.mark.parametrize(
        "characteristic, expected",
        [
            (CharacteristicName.MEAN, 2.0),
            (CharacteristicName.MEDIAN, 2.0 + 1.5 * MEDIAN_BASE),
            (CharacteristicName.MODE, 2.0 + 1.5 * MODE_BASE),
            (CharacteristicName.ENTROPY, ENTROPY_BASE + math.log(1.5)),
        ],
    )
    def test_moments(self, characteristic, expected):
        """Test closed-form characteristics."""
        actual = self.map_airy_dist_example.query_method(characteristic)(None)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_undefined_moments_are_nan(self):
        """Test that variance, skewness and kurtosis are NaN."""
        dist = self.map_airy_dist_example
        assert math.isnan(dist.variance)
        assert math.isnan(dist.skewness)
        assert math.isnan(dist.kurtosis)

        kurt_func = dist.query_method(CharacteristicName.KURT)
        assert math.isnan(kurt_func(None, excess=True))
        assert math.isnan(kurt_func(None, excess=False))

    def test_facade_properties(self):
        """Test façade properties against closed forms."""
        dist = self.map_airy_dist_example
        assert dist.mean == 2.0
        assert dist.median == pytest.approx(2.0 + 1.5 * MEDIAN_BASE)
        assert dist.mode == pytest.approx(2.0 + 1.5 * MODE_BASE)
        assert dist.entropy == pytest.approx(ENTROPY_BASE + math.log(1.5))

    def test_location_scale_relations(self):
        """Test pdf, cdf and ppf against the standardised evaluators."""
        dist = self.map_airy_dist_example
        for x in (-4.0, -0.5, 2.0, 3.7, 150.0):
            u = (x - 2.0) / 1.5
            assert dist.pdf(x) == pytest.approx(pdf_value(u) / 1.5, rel=1e-14)
            assert dist.cdf(x) == pytest.approx(cdf_value(u, False), rel=1e-14)
            assert dist.cdf(x, Tail.UPPER) == pytest.approx(cdf_value(u, True), rel=1e-14)
        for p in (1e-10, 0.2, 0.5, 0.9):
            assert dist.quantile(p) == pytest.approx(2.0 + 1.5 * quantile_value(p, False))
            assert dist.quantile(p, "upper") == pytest.approx(2.0 + 1.5 * quantile_value(p, True))

    def test_array_inputs(self):
        """Test that characteristics accept arrays and keep their shape."""
        dist = self.map_airy_dist_example
        xs = np.array([[-1.0, 0.0], [1.0, 2.0]])

        densities = dist.pdf(xs)
        assert isinstance(densities, np.ndarray)
        assert densities.shape == (2, 2)
        self.assert_arrays_relatively_equal(
            densities, np.array([[dist.pdf(float(x)) for x in row] for row in xs])
        )

        probabilities = np.array([0.1, 0.5, 0.9])
        self.assert_arrays_almost_equal(dist.cdf(dist.quantile(probabilities)), probabilities)

    def test_scalar_inputs_return_floats(self):
        """Test that scalar inputs give Python floats."""
        dist = self.map_airy_dist_example
        assert isinstance(dist.pdf(1.0), float)
        assert isinstance(dist.cdf(1.0), float)
        assert isinstance(dist.quantile(0.3), float)

    def test_survival_function(self):
        """Test that sf is the upper tail."""
        dist = self.map_airy_dist_example
        sf = dist.query_method(CharacteristicName.SF)
        for x in (-2.0, 0.0, 5.0):
            assert sf(x) == dist.cdf(x, tail=Tail.UPPER)

    def test_tails_sum_to_one(self):
        """Test that lower and upper tails are complementary."""
        dist = self.map_airy_dist_example
        for x in np.linspace(-20.0, 100.0, 121):
            total = dist.cdf(float(x)) + dist.cdf(float(x), tail=Tail.UPPER)
            assert total == pytest.approx(1.0, rel=1e-12)

    def test_quantile_round_trip(self):
        """Test cdf(quantile(p)) == p for both tails."""
        dist = self.map_airy_dist_example
        for p in np.logspace(-12, math.log10(0.99), 40):
            p = float(p)
            assert dist.cdf(dist.quantile(p)) == pytest.approx(p, rel=1e-9)
            assert dist.cdf(dist.quantile(p, Tail.UPPER), Tail.UPPER) == pytest.approx(p, rel=1e-9)

    def test_median_scenario(self):
        """Test median consistency on the standard distribution."""
        dist = map_airy()
        assert dist.quantile(0.5) == pytest.approx(dist.median, rel=1e-10)
        assert dist.cdf(dist.median) == pytest.approx(0.5, rel=1e-10)

    def test_extreme_inputs(self):
        """Test saturation and NaN propagation."""
        dist = self.map_airy_dist_example
        assert math.isnan(dist.pdf(math.nan))
        assert math.isnan(dist.cdf(math.nan))
        assert dist.pdf(math.inf) == 0.0
        assert dist.cdf(-100.0) == 0.0
        assert dist.quantile(0.0) == -math.inf
        assert dist.quantile(1.0) == math.inf
        assert math.isfinite(map_airy().quantile(1e-300))
        for p in (-0.5, 1.5, math.nan):
            assert math.isnan(dist.quantile(p))

    def test_invalid_tail(self):
        """Test that an unknown tail name is rejected."""
        with pytest.raises(ValueError):
            self.map_airy_dist_example.cdf(0.0, tail="middle")

    def test_characteristic_function(self):
        """Test the closed-form characteristic function."""
        dist = self.map_airy_dist_example
        cf = dist.query_method(CharacteristicName.CF)
        t = np.array([-2.0, -0.5, 0.0, 0.5, 2.0])
        values = cf(t)

        assert values[2] == 1.0
        self.assert_arrays_almost_equal(np.abs(values), np.exp(-np.abs(1.5 * t) ** 1.5))
        self.assert_arrays_almost_equal(values[:2], np.conj(values[-1:-3:-1]))

    def test_support(self):
        """Test support of Map-Airy distribution."""
        dist = self.map_airy_dist_example

        assert dist.support is REAL_LINE
        assert -1e300 in dist.support and 1e300 in dist.support

    def test_repr(self):
        """Test the short representation."""
        assert repr(self.map_airy_dist_example) == "MapAiryDistribution(mu=2.0, c=1.5)"


class TestMapAirySampling(BaseDistributionTest):
    """Test suite for Map-Airy sampling."""

    def setup_method(self):
        """Setup before each test method."""
        self.dist = map_airy(mu=1.0, c=2.0)

    def test_sample_shape(self):
        """Test sample container shape."""
        sample = self.dist.sample(500, rng=1)
        assert sample.shape == (500, 1)
        assert np.all(np.isfinite(sample.array))

    def test_seeded_sampling_is_reproducible(self):
        """Test that equal seeds give equal samples."""
        first = self.dist.sample(100, rng=123).array
        second = self.dist.sample(100, rng=np.random.default_rng(123)).array
        np.testing.assert_array_equal(first, second)

    def test_sample_one(self):
        """Test drawing a single variate."""
        assert isinstance(self.dist.sample_one(rng=5), float)
        assert self.dist.sample_one(rng=5) == self.dist.sample_one(rng=5)

    def test_sample_median(self):
        """Test that the sample median approaches the distribution median."""
        size = 50000
        values = self.dist.sample(size, rng=2025).array[:, 0]
        # asymptotic standard error of the sample median
        std_error = 1.0 / (2.0 * self.dist.pdf(self.dist.median) * math.sqrt(size))
        assert float(np.median(values)) == pytest.approx(self.dist.median, abs=5.0 * std_error)

    def test_empty_and_negative_sizes(self):
        """Test degenerate sample sizes."""
        assert self.dist.sample(0).shape == (0, 1)
        with pytest.raises(ValueError):
            self.dist.sample(-5)
