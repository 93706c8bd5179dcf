"""
Tests for Distribution Families Configuration

This module tests the configuration and registration of distribution families
in the global ParametricFamilyRegister.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import pytest

from pysatl_mapairy.families.builtins import MapAiryDistribution, configure_map_airy_family
from pysatl_mapairy.families.configuration import (
    configure_families_register,
    reset_families_register,
)
from pysatl_mapairy.families.registry import ParametricFamilyRegister
from pysatl_mapairy.types import FamilyName


class TestConfiguration:
    """Test suite for configuration functionality."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_configure_families_register_returns_registry(self):
        """Test that configure_families_register returns a ParametricFamilyRegister."""
        assert isinstance(self.registry, ParametricFamilyRegister)

    def test_configure_families_register_is_singleton(self):
        """Test that configure_families_register returns the same instance."""
        registry2 = configure_families_register()
        assert self.registry is registry2
        assert ParametricFamilyRegister() is self.registry

    def test_families_registered(self):
        """Test that all expected families are registered."""
        assert ParametricFamilyRegister.contains(FamilyName.MAP_AIRY)
        family = self.registry.get(FamilyName.MAP_AIRY)
        assert family.distribution_class is MapAiryDistribution

    def test_configure_map_airy_family_is_idempotent(self):
        """Test that repeated configuration does not re-register the family."""
        family = self.registry.get(FamilyName.MAP_AIRY)
        configure_map_airy_family()
        assert self.registry.get(FamilyName.MAP_AIRY) is family

    def test_reset_families_register(self):
        """Test that reset drops registered families."""
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.MAP_AIRY)

        registry = configure_families_register()
        assert registry is not self.registry
        assert ParametricFamilyRegister.contains(FamilyName.MAP_AIRY)


class TestRegister:
    """Test suite for the family registry."""

    def setup_method(self):
        """Setup before each test method."""
        self.registry = configure_families_register()

    def test_unknown_family(self):
        """Test that unknown families raise ValueError."""
        with pytest.raises(ValueError, match="No family Missing found"):
            ParametricFamilyRegister.get("Missing")

    def test_duplicate_registration(self):
        """Test that registering the same name twice raises ValueError."""
        family = self.registry.get(FamilyName.MAP_AIRY)
        with pytest.raises(ValueError, match="already found in register"):
            ParametricFamilyRegister.register(family)

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture):
        """Test that registration emits a DEBUG record."""
        reset_families_register()
        with caplog.at_level(logging.DEBUG, logger="pysatl_mapairy.families.registry"):
            configure_families_register()
        assert "Registered parametric family MapAiry" in caplog.messages
