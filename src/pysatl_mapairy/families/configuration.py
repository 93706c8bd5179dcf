"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of the package:

- :class:`MapAiry Family` — stable law with ``alpha = 3/2``, ``beta = 1``.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration is idempotent: repeated calls return the same registry.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_mapairy.families.builtins import configure_map_airy_family
from pysatl_mapairy.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_map_airy_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
