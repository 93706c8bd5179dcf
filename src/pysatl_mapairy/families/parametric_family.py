"""
Parametric families of distributions.

A family owns its parametrizations, the analytical characteristics defined
for them and the strategies its distributions share, and builds distribution
instances from parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from pysatl_mapairy.distributions.computation import AnalyticalComputation
from pysatl_mapairy.distributions.strategies import DefaultComputationStrategy
from pysatl_mapairy.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_mapairy.distributions.strategies import SamplingStrategy
    from pysatl_mapairy.distributions.support import Support
    from pysatl_mapairy.families.parametrizations import Parametrization
    from pysatl_mapairy.types import (
        EuclideanDistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type CharacteristicForms = dict[ParametrizationName, ParametrizedFunction]


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Registry name of the family.
    distr_type : EuclideanDistributionType
        Type shared by every member of the family.
    distr_parametrizations : list[ParametrizationName]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        Characteristic name to either a single function (defined for the base
        parametrization) or a mapping from parametrization name to function.
        Each function takes the parameters first, then the evaluation point.
    sampling_strategy : SamplingStrategy
        Sampler shared by the family's distributions.
    support : Support or None, optional
        Support shared by the family's distributions.
    distribution_class : type[ParametricFamilyDistribution], optional
        Class of the instances built by :meth:`distribution`.

    Notes
    -----
    A characteristic requested in a parametrization that has no own form
    for it is evaluated with the parameters converted to the base
    parametrization.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName, CharacteristicForms | ParametrizedFunction
        ],
        sampling_strategy: SamplingStrategy,
        support: Support | None = None,
        distribution_class: type[ParametricFamilyDistribution] = ParametricFamilyDistribution,
    ):
        self._name = name
        self._distr_type = distr_type
        self._support = support
        self._distribution_class = distribution_class
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.parametrization_names = distr_parametrizations
        self.base_parametrization_name = distr_parametrizations[0]
        self.sampling_strategy = sampling_strategy
        self.computation_strategy: DefaultComputationStrategy[Any, Any] = (
            DefaultComputationStrategy()
        )

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {
            characteristic: (
                forms if isinstance(forms, dict) else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }

        # parametrization -> characteristic -> parametrization whose form is used
        self._providers: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {
            pname: {
                characteristic: pname if pname in forms else self.base_parametrization_name
                for characteristic, forms in self.distr_characteristics.items()
                if pname in forms or self.base_parametrization_name in forms
            }
            for pname in self.parametrization_names
        }

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization has not been registered yet.
        """
        if self.base_parametrization_name not in self._parametrizations:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return self._parametrizations[self.base_parametrization_name]

    @property
    def distribution_class(self) -> type[ParametricFamilyDistribution]:
        return self._distribution_class

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Add a parametrization class under ``name``.

        Raises
        ------
        ValueError
            If ``name`` is taken.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert ``parameters`` to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def bind_characteristics(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every available characteristic to ``parameters``."""
        base = self.to_base(parameters)
        return {
            characteristic: AnalyticalComputation(
                target=characteristic,
                func=partial(
                    self.distr_characteristics[characteristic][provider],
                    parameters if provider == parameters.name else base,
                ),
            )
            for characteristic, provider in self._providers.get(parameters.name, {}).items()
        }

    def distribution(
        self, parametrization_name: str | None = None, **parameters_values: Any
    ) -> ParametricFamilyDistribution:
        """
        Build a validated distribution instance.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization of ``parameters_values``; the base one by default.
        **parameters_values
            Parameter values.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        ValueError
            If the parameters, or their base-parametrization equivalent,
            violate a constraint.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        self.to_base(parameters).validate()
        return self._distribution_class(self.name, self._distr_type, parameters, self._support)

    __call__ = distribution
