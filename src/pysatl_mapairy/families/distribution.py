"""
Distribution instances handed out by parametric families.

An instance pairs a family name with validated parameters; everything else
(characteristics, sampling) is looked up on the registered family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_mapairy.distributions.distribution import Distribution
from pysatl_mapairy.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_mapairy.distributions.computation import AnalyticalComputation
    from pysatl_mapairy.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_mapairy.distributions.support import Support
    from pysatl_mapairy.families.parametric_family import ParametricFamily
    from pysatl_mapairy.families.parametrizations import Parametrization
    from pysatl_mapairy.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
    )

    type ComputationMap = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A member of a registered parametric family.

    Parameters
    ----------
    family_name : str
        Name under which the family is registered.
    _distribution_type : EuclideanDistributionType
        Type descriptor shared by the family.
    parameters : Parametrization
        Validated parameters, in the parametrization the caller used.
    _support : Support or None
        Support of the distribution, if the family declares one.
    """

    family_name: str
    _distribution_type: EuclideanDistributionType
    parameters: Parametrization
    _support: Support | None
    _computations: ComputationMap | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """The registered family this instance belongs to."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters in the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Characteristic callables bound to this instance's parameters.

        Bound on first access and kept for the lifetime of the instance.
        """
        if self._computations is None:
            self._computations = self.family.bind_characteristics(self.parameters)
        return self._computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support
