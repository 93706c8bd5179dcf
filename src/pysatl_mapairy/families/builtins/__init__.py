"""
Built-in distribution families for PySATL Map-Airy.

This package contains the distribution families that are available by
default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_mapairy.families.builtins.continuous import (
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
