from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import integrate

from pysatl_mapairy.approximation import cdf_value, pdf_value
from pysatl_mapairy.families.builtins.continuous.map_airy import MEDIAN_BASE

TAIL = 1.0 / math.sqrt(2.0 * math.pi)
BREAKPOINTS = [1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 64.0, -1.0, -2.0, -4.0, -8.0, -16.0]
GRID = np.linspace(-30.0, 300.0, 3301)


def _integrate(func, a: float, b: float) -> float:
    return integrate.quad(func, a, b, limit=200, epsabs=1e-13, epsrel=1e-11)[0]


class TestCdfValue:
    @pytest.mark.parametrize("x", [-31.0, -5.0, -1.5, -0.3, 0.0, 0.7, 3.0, 50.0, 1e5, 1e200])
    def test_tails_are_complementary(self, x: float):
        assert cdf_value(x, False) + cdf_value(x, True) == pytest.approx(1.0, rel=1e-12)

    def test_lower_tail_non_decreasing(self):
        values = np.array([cdf_value(float(x), False) for x in GRID])
        assert np.all(np.diff(values) >= 0.0)
        assert np.all((values >= 0.0) & (values <= 1.0))

    def test_upper_tail_non_increasing(self):
        values = np.array([cdf_value(float(x), True) for x in GRID])
        assert np.all(np.diff(values) <= 0.0)

    def test_special_inputs(self):
        assert math.isnan(cdf_value(math.nan, False))
        assert math.isnan(cdf_value(math.nan, True))
        assert cdf_value(math.inf, False) == 1.0
        assert cdf_value(math.inf, True) == 0.0
        assert cdf_value(-math.inf, False) == 0.0
        assert cdf_value(-math.inf, True) == 1.0

    def test_lower_tail_underflows_to_zero(self):
        assert cdf_value(-33.0, False) == 0.0
        assert cdf_value(-33.0, True) == 1.0

    @pytest.mark.parametrize("x", BREAKPOINTS)
    @pytest.mark.parametrize("complementary", [False, True])
    def test_continuous_across_breakpoints(self, x: float, complementary: bool):
        eps = 1e-9
        left = cdf_value(x - eps, complementary)
        right = cdf_value(x + eps, complementary)
        assert left == pytest.approx(right, rel=1e-6, abs=1e-300)

    def test_median(self):
        assert cdf_value(MEDIAN_BASE, False) == pytest.approx(0.5, rel=1e-12)

    def test_power_law_upper_tail(self):
        x = 1e12
        assert cdf_value(x, True) * x**1.5 == pytest.approx(TAIL, rel=1e-10)

    @pytest.mark.parametrize("x", [-3.0, -1.0, 0.0, 1.5])
    def test_lower_tail_matches_integrated_density(self, x: float):
        mass = _integrate(pdf_value, -40.0, x)
        assert cdf_value(x, False) == pytest.approx(mass, abs=1e-9)

    @pytest.mark.parametrize("x", [0.5, 10.0, 100.0])
    def test_upper_tail_matches_integrated_density(self, x: float):
        mass = _integrate(pdf_value, x, math.inf)
        assert cdf_value(x, True) == pytest.approx(mass, rel=1e-7)
