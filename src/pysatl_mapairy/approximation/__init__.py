"""
Approximation subpackage

Double-precision evaluation engine for the standard Map-Airy law
(``mu = 0``, ``c = 1``):

- rational approximant kernel (:mod:`.pade`) and segment dispatch
  (:mod:`.segments`);
- coefficient tables (:mod:`.tables`);
- density, tail probability and quantile evaluators (:mod:`.pdf`,
  :mod:`.cdf`, :mod:`.quantile`);
- closed-form variate transform (:mod:`.sampling`);
- optional segment instrumentation (:mod:`.instrumentation`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .cdf import cdf_value
from .instrumentation import get_segment_hook, log_segment, set_segment_hook
from .pade import PadeTable, horner, pade
from .pdf import pdf_value
from .quantile import quantile_value
from .sampling import map_airy_variate, open_uniform

__all__ = [
    # kernel
    "PadeTable",
    "horner",
    "pade",
    # evaluators
    "pdf_value",
    "cdf_value",
    "quantile_value",
    # sampling
    "map_airy_variate",
    "open_uniform",
    # instrumentation
    "set_segment_hook",
    "get_segment_hook",
    "log_segment",
]
