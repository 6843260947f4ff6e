"""Plane angle conversion and sexagesimal (degrees/minutes/seconds) helpers."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from typing import Any, Tuple

import numpy as np

from .. import constants
from ..settings import decimal_context
from ..unit_types import AngleUnit
from .base import LinearConverter, as_float_operand, coerce_operands


MINUTES_PER_DEGREE = 60
SECONDS_PER_MINUTE = 60


def _floor(value: Any) -> Any:
    if isinstance(value, Decimal):
        return value.to_integral_value(rounding=ROUND_FLOOR)
    return np.floor(value)


class AngleConverter(LinearConverter[AngleUnit]):
    """Radian/degree conversion plus splitting into degrees, minutes and seconds."""

    def __init__(self) -> None:
        super().__init__(
            AngleUnit,
            {AngleUnit.RADIANS: 1, AngleUnit.DEGREES: constants.RADIANS_PER_DEGREE},
        )

    def to_degrees_and_minutes(self, value: Any, unit: AngleUnit) -> Tuple[Any, Any]:
        """Split an angle into whole degrees and decimal minutes.

        The split uses ``floor`` so negative angles keep a positive minutes part
        (``-0.5°`` becomes ``(-1, 30)``).
        """

        decimal_degrees = self.convert(value, unit, AngleUnit.DEGREES)
        with decimal_context():
            degrees = _floor(decimal_degrees)
            minutes = (decimal_degrees - degrees) * MINUTES_PER_DEGREE
        return degrees, minutes

    def to_degrees_minutes_and_seconds(self, value: Any, unit: AngleUnit) -> Tuple[Any, Any, Any]:
        degrees, decimal_minutes = self.to_degrees_and_minutes(value, unit)
        with decimal_context():
            minutes = _floor(decimal_minutes)
            seconds = (decimal_minutes - minutes) * SECONDS_PER_MINUTE
        return degrees, minutes, seconds

    def from_degrees_and_minutes(self, degrees: Any, minutes: Any, result_unit: AngleUnit) -> Any:
        degrees, minutes = coerce_operands(degrees, minutes)
        with decimal_context():
            decimal_degrees = degrees + minutes / MINUTES_PER_DEGREE
        return self.convert(decimal_degrees, AngleUnit.DEGREES, result_unit)

    def from_degrees_minutes_and_seconds(self, degrees: Any, minutes: Any, seconds: Any, result_unit: AngleUnit) -> Any:
        degrees, minutes, seconds = coerce_operands(degrees, minutes, seconds)
        with decimal_context():
            decimal_minutes = minutes + seconds / SECONDS_PER_MINUTE
        return self.from_degrees_and_minutes(degrees, decimal_minutes, result_unit)


ANGLE_CONVERTER = AngleConverter()


def degrees_to_radians(value: Any) -> Any:
    if isinstance(value, Decimal):
        return ANGLE_CONVERTER.convert(value, AngleUnit.DEGREES, AngleUnit.RADIANS)
    return np.deg2rad(as_float_operand(value))


def radians_to_degrees(value: Any) -> Any:
    if isinstance(value, Decimal):
        return ANGLE_CONVERTER.convert(value, AngleUnit.RADIANS, AngleUnit.DEGREES)
    return np.rad2deg(as_float_operand(value))


__all__ = [
    "ANGLE_CONVERTER",
    "AngleConverter",
    "degrees_to_radians",
    "radians_to_degrees",
]
