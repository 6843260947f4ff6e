"""Unit system classification shared by every unit enumeration."""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple, TypeVar

from .errors import InvalidArgumentError


class UnitSystem(Enum):
    """System of units a unit belongs to."""

    METRIC = "metric"
    IMPERIAL = "imperial"


U = TypeVar("U", bound="QuantityUnit")


class QuantityUnit(Enum):
    """Base class for the unit enumerations of one quantity.

    Members are declared as ``NAME = (symbol, classification)``; the first
    member of every enumeration is the base unit of its quantity.
    """

    def __init__(self, symbol: str, classification: Any) -> None:
        self.symbol = symbol
        self._classification = classification

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def base_unit(cls: type[U]) -> U:
        return next(iter(cls))

    @classmethod
    def validate(cls: type[U], unit: Any) -> U:
        if unit is None:
            raise InvalidArgumentError(f"{cls.__name__} is required.")
        if not isinstance(unit, cls):
            raise InvalidArgumentError(f"Expected a {cls.__name__}, got {unit!r}.")
        return unit


class MetricImperialUnit(QuantityUnit):
    """Units classified as either metric or imperial."""

    @property
    def system(self) -> UnitSystem:
        return self._classification

    @classmethod
    def get_unit_system(cls, unit: Any) -> UnitSystem:
        """Return the :class:`UnitSystem` of *unit*; ``None`` is rejected."""

        return cls.validate(unit).system

    @classmethod
    def is_metric(cls, unit: Any) -> bool:
        return cls.get_unit_system(unit) is UnitSystem.METRIC

    @classmethod
    def is_imperial(cls, unit: Any) -> bool:
        return cls.get_unit_system(unit) is UnitSystem.IMPERIAL

    @classmethod
    def get_metric_units(cls: type[U]) -> Tuple[U, ...]:
        return tuple(unit for unit in cls if unit.system is UnitSystem.METRIC)

    @classmethod
    def get_imperial_units(cls: type[U]) -> Tuple[U, ...]:
        return tuple(unit for unit in cls if unit.system is UnitSystem.IMPERIAL)


class InternationalSystemUnit(QuantityUnit):
    """Units classified as SI (metric) or outside the International System.

    Non-SI units have no metric/imperial system at all, so
    :meth:`get_unit_system` rejects them.
    """

    @property
    def international(self) -> bool:
        return bool(self._classification)

    @classmethod
    def get_unit_system(cls, unit: Any) -> UnitSystem:
        unit = cls.validate(unit)
        if not unit.international:
            raise InvalidArgumentError(f"{unit.name} is not part of the metric system.")
        return UnitSystem.METRIC

    @classmethod
    def is_metric(cls, unit: Any) -> bool:
        return cls.validate(unit).international

    @classmethod
    def is_non_international_system(cls, unit: Any) -> bool:
        return not cls.validate(unit).international

    @classmethod
    def get_metric_units(cls: type[U]) -> Tuple[U, ...]:
        return tuple(unit for unit in cls if unit.international)

    @classmethod
    def get_non_international_system_units(cls: type[U]) -> Tuple[U, ...]:
        return tuple(unit for unit in cls if not unit.international)


__all__ = [
    "InternationalSystemUnit",
    "MetricImperialUnit",
    "QuantityUnit",
    "UnitSystem",
]
