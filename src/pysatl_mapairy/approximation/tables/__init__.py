"""
Coefficient tables for the Map-Airy approximants.

Tables are grouped per evaluated function; each constant covers one segment
of the normalised input domain (or of probability space for the quantile).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
