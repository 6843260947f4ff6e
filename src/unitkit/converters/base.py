"""Converter base classes shared by every quantity."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Generic, Mapping, Tuple, TypeVar

import numpy as np

from ..errors import InvalidArgumentError
from ..settings import decimal_context
from ..unit_system import QuantityUnit

if TYPE_CHECKING:  # pragma: no cover
    from ..measurement import Measurement


U = TypeVar("U", bound=QuantityUnit)


def as_float_operand(value: Any) -> Any:
    """Return *value* ready for float arithmetic; sequences become numpy arrays."""

    if isinstance(value, (list, tuple)):
        return np.asarray(value, dtype=float)
    return value


def to_decimal(value: Any) -> Decimal:
    """Promote *value* to :class:`~decimal.Decimal` without binary noise."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    return Decimal(repr(float(value)))


def coerce_operands(*values: Any) -> Tuple[Any, ...]:
    """Promote every operand to ``Decimal`` as soon as one of them is a ``Decimal``."""

    if any(isinstance(value, Decimal) for value in values):
        return tuple(to_decimal(value) for value in values)
    return values


class Converter(Generic[U]):
    """Stateless conversion between the units of one quantity.

    ``convert`` keeps the numeric class of its input: a :class:`~decimal.Decimal`
    runs through decimal arithmetic (at the configured precision) and comes back
    as a ``Decimal``; anything else follows the float path, which also accepts
    numpy arrays.
    """

    def __init__(self, unit_type: type[U]) -> None:
        self.unit_type = unit_type

    # ------------------------------------------------------------------ numeric API
    def convert(self, value: Any, input_unit: U, output_unit: U) -> Any:
        if value is None:
            raise InvalidArgumentError("A value is required for conversion.")
        input_unit = self.unit_type.validate(input_unit)
        output_unit = self.unit_type.validate(output_unit)
        if input_unit is output_unit:
            return value
        if isinstance(value, Decimal):
            with decimal_context():
                return self._convert_decimal(value, input_unit, output_unit)
        return self._convert_float(as_float_operand(value), input_unit, output_unit)

    def _convert_float(self, value: Any, input_unit: U, output_unit: U) -> Any:
        raise NotImplementedError

    def _convert_decimal(self, value: Decimal, input_unit: U, output_unit: U) -> Decimal:
        raise NotImplementedError

    # ------------------------------------------------------------------ measurement API
    def value_of(self, measurement: "Measurement", output_unit: U) -> Any:
        """Return the value of *measurement* expressed in *output_unit*."""

        return self.convert(measurement.value, measurement.unit, output_unit)

    def convert_into(self, measurement: "Measurement", output_unit: U, result: "Measurement") -> None:
        """Store *measurement* converted to *output_unit* into *result*."""

        output_unit = result.unit_type.validate(output_unit)
        value = self.value_of(measurement, output_unit)
        result.value = value
        result.unit = output_unit

    def convert_in_place(self, measurement: "Measurement", output_unit: U) -> None:
        self.convert_into(measurement, output_unit, measurement)

    def convert_and_return_new(self, measurement: "Measurement", output_unit: U) -> "Measurement":
        result = type(measurement)()
        self.convert_into(measurement, output_unit, result)
        return result

    def convert_to(self, measurement: "Measurement", output: "Measurement") -> None:
        """Convert *measurement* into the unit already set on *output*."""

        self.convert_into(measurement, output.unit, output)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.unit_type.__name__})"


class LinearConverter(Converter[U]):
    """Converter for quantities whose units differ only by a scale factor.

    *factors* maps every unit to its size in the base unit; a value moves from
    the input unit to the base unit and from there to the output unit.
    """

    def __init__(self, unit_type: type[U], factors: Mapping[U, Decimal]) -> None:
        super().__init__(unit_type)
        missing = [unit.name for unit in unit_type if unit not in factors]
        if missing:
            raise InvalidArgumentError(f"No conversion factor for {unit_type.__name__}: {missing}.")
        self.decimal_factors: dict[U, Decimal] = {unit: Decimal(factors[unit]) for unit in unit_type}
        self.float_factors: dict[U, float] = {unit: float(factor) for unit, factor in self.decimal_factors.items()}

    def _convert_float(self, value: Any, input_unit: U, output_unit: U) -> Any:
        base = value * self.float_factors[input_unit]
        return base / self.float_factors[output_unit]

    def _convert_decimal(self, value: Decimal, input_unit: U, output_unit: U) -> Decimal:
        base = value * self.decimal_factors[input_unit]
        return base / self.decimal_factors[output_unit]


__all__ = ["Converter", "LinearConverter", "as_float_operand", "coerce_operands", "to_decimal"]
