"""Temperature conversion.

Temperature scales are affine rather than proportional, so every pair of units
is composed from two primitive conversions pivoting on Celsius:

* Kelvin <-> Celsius is a pure offset (``ABSOLUTE_ZERO``);
* Celsius <-> Fahrenheit is ``F = C * 9/5 + 32``.

The primitives accept floats, numpy arrays or :class:`~decimal.Decimal` values
and keep the numeric class of their argument.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .. import constants
from ..settings import decimal_context
from ..unit_types import TemperatureUnit
from .base import Converter, as_float_operand


ABSOLUTE_ZERO = float(constants.ABSOLUTE_ZERO_CELSIUS)


def _absolute_zero(value: Any) -> Any:
    return constants.ABSOLUTE_ZERO_CELSIUS if isinstance(value, Decimal) else ABSOLUTE_ZERO


def kelvin_to_celsius(kelvin: Any) -> Any:
    with decimal_context():
        return as_float_operand(kelvin) + _absolute_zero(kelvin)


def celsius_to_kelvin(celsius: Any) -> Any:
    with decimal_context():
        return as_float_operand(celsius) - _absolute_zero(celsius)


def celsius_to_fahrenheit(celsius: Any) -> Any:
    with decimal_context():
        return as_float_operand(celsius) * 9 / 5 + 32


def fahrenheit_to_celsius(fahrenheit: Any) -> Any:
    with decimal_context():
        return (as_float_operand(fahrenheit) - 32) * 5 / 9


def kelvin_to_fahrenheit(kelvin: Any) -> Any:
    return celsius_to_fahrenheit(kelvin_to_celsius(kelvin))


def fahrenheit_to_kelvin(fahrenheit: Any) -> Any:
    return celsius_to_kelvin(fahrenheit_to_celsius(fahrenheit))


_TO_CELSIUS = {
    TemperatureUnit.CELSIUS: lambda value: value,
    TemperatureUnit.KELVIN: kelvin_to_celsius,
    TemperatureUnit.FAHRENHEIT: fahrenheit_to_celsius,
}

_FROM_CELSIUS = {
    TemperatureUnit.CELSIUS: lambda value: value,
    TemperatureUnit.KELVIN: celsius_to_kelvin,
    TemperatureUnit.FAHRENHEIT: celsius_to_fahrenheit,
}


class TemperatureConverter(Converter[TemperatureUnit]):
    """Converter for the Celsius, Fahrenheit and Kelvin scales."""

    def __init__(self) -> None:
        super().__init__(TemperatureUnit)

    def _convert_float(self, value: Any, input_unit: TemperatureUnit, output_unit: TemperatureUnit) -> Any:
        return _FROM_CELSIUS[output_unit](_TO_CELSIUS[input_unit](value))

    def _convert_decimal(self, value: Decimal, input_unit: TemperatureUnit, output_unit: TemperatureUnit) -> Decimal:
        return _FROM_CELSIUS[output_unit](_TO_CELSIUS[input_unit](value))


TEMPERATURE_CONVERTER = TemperatureConverter()


__all__ = [
    "ABSOLUTE_ZERO",
    "TEMPERATURE_CONVERTER",
    "TemperatureConverter",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
]
