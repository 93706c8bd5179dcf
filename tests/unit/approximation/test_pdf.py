from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import integrate

from pysatl_mapairy.approximation import pdf_value
from pysatl_mapairy.families.builtins.continuous.map_airy import ENTROPY_BASE, MODE_BASE

TAIL = 1.0 / math.sqrt(2.0 * math.pi)
BREAKPOINTS = [1.0, 2.0, 4.0, 8.0, 16.0, 32.0, 64.0, -1.0, -2.0, -4.0, -8.0, -16.0]


def _integrate(func, a: float, b: float) -> float:
    return integrate.quad(func, a, b, limit=200, epsabs=1e-13, epsrel=1e-11)[0]


class TestPdfValue:
    def test_non_negative_on_grid(self):
        for x in np.linspace(-40.0, 200.0, 2401):
            assert pdf_value(float(x)) >= 0.0

    def test_special_inputs(self):
        assert math.isnan(pdf_value(math.nan))
        assert pdf_value(math.inf) == 0.0
        assert pdf_value(-math.inf) == 0.0

    @pytest.mark.parametrize("x", [-32.5, -40.0, -1e10])
    def test_lower_tail_underflows_to_zero(self, x: float):
        assert pdf_value(x) == 0.0

    @pytest.mark.parametrize("x", BREAKPOINTS)
    def test_continuous_across_breakpoints(self, x: float):
        eps = 1e-9
        left, right = pdf_value(x - eps), pdf_value(x + eps)
        assert left == pytest.approx(right, rel=1e-6, abs=1e-300)

    def test_mode_is_maximum(self):
        peak = pdf_value(MODE_BASE)
        assert peak >= pdf_value(MODE_BASE - 1e-3)
        assert peak >= pdf_value(MODE_BASE + 1e-3)
        assert peak > pdf_value(0.0)

    def test_power_law_upper_tail(self):
        x = 1e20
        assert pdf_value(2.0 * x) / pdf_value(x) == pytest.approx(2.0**-2.5, rel=1e-10)
        assert pdf_value(x) * x**2.5 == pytest.approx(1.5 * TAIL, rel=1e-10)

    def test_tiny_positive_at_large_abscissa(self):
        value = pdf_value(1e20)
        assert 0.0 < value < 1e-49

    def test_normalised(self):
        pieces = [(-40.0, -2.0), (-2.0, 0.0), (0.0, 64.0), (64.0, math.inf)]
        total = sum(_integrate(pdf_value, a, b) for a, b in pieces)
        assert total == pytest.approx(1.0, abs=1e-8)

    def test_entropy_constant(self):
        def integrand(x: float) -> float:
            p = pdf_value(x)
            return -p * math.log(p) if p > 0.0 else 0.0

        pieces = [(-30.0, -2.0), (-2.0, 0.0), (0.0, 64.0), (64.0, math.inf)]
        entropy = sum(_integrate(integrand, a, b) for a, b in pieces)
        assert entropy == pytest.approx(ENTROPY_BASE, abs=1e-6)
