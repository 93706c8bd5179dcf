"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_mapairy.families.builtins.continuous.map_airy import (
    MapAiryDistribution,
    MapAirySamplingStrategy,
    configure_map_airy_family,
    map_airy,
)

__all__ = [
    "configure_map_airy_family",
    "map_airy",
    "MapAiryDistribution",
    "MapAirySamplingStrategy",
]
