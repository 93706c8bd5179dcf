"""
PySATL Map-Airy
===============

Double-precision Map-Airy distribution (stable law with ``alpha = 3/2``,
``beta = 1``) built on the PySATL parametric family framework: density,
tail probabilities, quantiles, sampling, closed-form moments and stable-sum
algebra.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-mapairy")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
