"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass of parameter values registered with a
family under a name. Methods marked with :func:`constraint` are collected at
registration time and checked by :meth:`Parametrization.validate`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields
from inspect import isfunction
from typing import TYPE_CHECKING

from pysatl_mapairy.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_mapairy.families.parametric_family import ParametricFamily

_CONSTRAINT_MARK = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    A named predicate over parameter values.

    Parameters
    ----------
    description : str
        Text reported when the predicate fails, e.g. ``"c > 0"``.
    check : Callable[[Any], bool]
        Predicate taking the parametrization instance.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of family parametrizations.

    Subclasses declare their parameters as annotated fields and are turned
    into frozen dataclasses by :func:`parametrization`. Fields declared with
    ``init=False`` hold derived values and are not reported as parameters.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values keyed by field name."""
        declared = fields(self)  # type: ignore[arg-type]
        return {f.name: getattr(self, f.name) for f in declared if f.init}

    def validate(self) -> None:
        """
        Check every constraint, in declaration order.

        Raises
        ------
        ValueError
            On the first constraint that does not hold.
        """
        for item in self._constraints:
            if not item.check(self):
                raise ValueError(f'Constraint "{item.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the family's base parametrization (``self`` by default)."""
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Text used in the validation error when the method returns False.
    """

    def decorator(func: F) -> F:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class becomes a slotted frozen dataclass and its :func:`constraint`
    methods are collected in declaration order.

    Raises
    ------
    ValueError
        If ``family`` already has a parametrization called ``name``.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        cls = dataclass(slots=True, frozen=True)(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = [
            ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_MARK), check=attr)
            for attr in cls.__dict__.values()
            if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK)
        ]
        family.register_parametrization(name, cls)
        return cls

    return decorator
