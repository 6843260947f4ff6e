"""Generic value-plus-unit container shared by every quantity."""

from __future__ import annotations

import logging
import numbers
import operator
from decimal import Decimal
from typing import Any, Callable, ClassVar, Dict, Generic, TypeVar

from . import formatting
from .converters.base import Converter, coerce_operands, to_decimal
from .errors import InvalidArgumentError
from .settings import decimal_context, get_settings
from .unit_system import QuantityUnit, UnitSystem


logger = logging.getLogger(__name__)

U = TypeVar("U", bound=QuantityUnit)
M = TypeVar("M", bound="Measurement")

QUANTITY_TYPES: Dict[str, type] = {}


class Measurement(Generic[U]):
    """A numeric value bound to a unit of one quantity.

    Subclasses bind the quantity::

        class Weight(Measurement[WeightUnit], unit_type=WeightUnit, converter=WEIGHT_CONVERTER):
            pass

    ``Weight()`` leaves both fields unset (to be filled through the setters);
    ``Weight(value, unit)`` requires both.  Values keep their numeric class:
    a :class:`~decimal.Decimal` stays a ``Decimal`` through conversion and
    arithmetic.  Instances are mutable and therefore unhashable.
    """

    unit_type: ClassVar[type]
    converter: ClassVar[Converter]

    __hash__ = None  # type: ignore[assignment]

    def __init_subclass__(cls, *, unit_type: type | None = None, converter: Converter | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # subclasses of a bound quantity inherit its unit type and converter
        if unit_type is not None:
            cls.unit_type = unit_type
        if converter is not None:
            cls.converter = converter
        if getattr(cls, "unit_type", None) is None or getattr(cls, "converter", None) is None:
            raise TypeError(f"{cls.__name__} must be bound to a unit type and a converter.")
        QUANTITY_TYPES[cls.__name__] = cls

    def __init__(self, value: Any = None, unit: U | None = None) -> None:
        self._value: Any = None
        self._unit: U | None = None
        if value is None and unit is None:
            return
        self.value = value
        self.unit = unit

    # ------------------------------------------------------------------ fields
    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if value is None:
            raise InvalidArgumentError("Measurement value is required.")
        if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
            raise InvalidArgumentError(f"Measurement value must be a real number, got {value!r}.")
        self._value = value

    @property
    def unit(self) -> U | None:
        return self._unit

    @unit.setter
    def unit(self, unit: U) -> None:
        self._unit = self.unit_type.validate(unit)

    def is_set(self) -> bool:
        return self._value is not None and self._unit is not None

    # ------------------------------------------------------------------ equality
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Measurement):
            return NotImplemented
        return (
            other.unit_type is self.unit_type
            and self.is_set()
            and other.is_set()
            and self._unit is other._unit
            and self._value == other._value
        )

    def equals(self, other: Any, tolerance: float | Decimal | None = None) -> bool:
        """Return whether *other* lies within *tolerance* of this measurement.

        *other* is first expressed in this measurement's unit, so ``1 g`` and
        ``1000 mg`` compare equal.  ``None`` or a measurement of another
        quantity is simply unequal.
        """

        if tolerance is None:
            tolerance = get_settings().default_tolerance
        if not isinstance(other, Measurement) or other.unit_type is not self.unit_type:
            return False
        if not (self.is_set() and other.is_set()):
            return False
        other_value = other._value
        if other._unit is not self._unit:
            other_value = self.converter.convert(other_value, other._unit, self._unit)
            logger.debug("Compared %r against %r converted to %r", self, other, other_value)
        mine, theirs = coerce_operands(self._value, other_value)
        with decimal_context():
            difference = abs(mine - theirs)
            if isinstance(difference, Decimal):
                return difference <= to_decimal(tolerance)
            return bool(difference <= tolerance)

    # ------------------------------------------------------------------ conversion
    def value_in(self, unit: U) -> Any:
        return self.converter.value_of(self, unit)

    def to(self: M, unit: U) -> M:
        """Return a new measurement holding this one expressed in *unit*."""

        return self.converter.convert_and_return_new(self, unit)

    def copy(self: M) -> M:
        if not self.is_set():
            return type(self)()
        return type(self)(self._value, self._unit)

    # ------------------------------------------------------------------ arithmetic (class level)
    @classmethod
    def _combine_values(cls, op: Callable[[Any, Any], Any], value1: Any, unit1: U, value2: Any, unit2: U, result_unit: U) -> Any:
        value1, value2 = coerce_operands(value1, value2)
        converted1 = cls.converter.convert(value1, unit1, result_unit)
        converted2 = cls.converter.convert(value2, unit2, result_unit)
        with decimal_context():
            return op(converted1, converted2)

    @classmethod
    def add_values(cls, value1: Any, unit1: U, value2: Any, unit2: U, result_unit: U) -> Any:
        """Add two raw values after expressing both in *result_unit*."""

        return cls._combine_values(operator.add, value1, unit1, value2, unit2, result_unit)

    @classmethod
    def subtract_values(cls, value1: Any, unit1: U, value2: Any, unit2: U, result_unit: U) -> Any:
        return cls._combine_values(operator.sub, value1, unit1, value2, unit2, result_unit)

    @classmethod
    def add_measurements(cls, arg1: "Measurement", arg2: "Measurement", result: "Measurement") -> None:
        """Store ``arg1 + arg2`` into *result*, using the unit already set on it."""

        result.value = cls.add_values(arg1.value, arg1.unit, arg2.value, arg2.unit, result.unit)

    @classmethod
    def subtract_measurements(cls, arg1: "Measurement", arg2: "Measurement", result: "Measurement") -> None:
        result.value = cls.subtract_values(arg1.value, arg1.unit, arg2.value, arg2.unit, result.unit)

    @classmethod
    def sum_and_return_new(cls: type[M], arg1: "Measurement", arg2: "Measurement", unit: U) -> M:
        result = cls()
        result.unit = unit
        cls.add_measurements(arg1, arg2, result)
        return result

    @classmethod
    def difference_and_return_new(cls: type[M], arg1: "Measurement", arg2: "Measurement", unit: U) -> M:
        result = cls()
        result.unit = unit
        cls.subtract_measurements(arg1, arg2, result)
        return result

    # ------------------------------------------------------------------ arithmetic (instance level)
    def add_and_return_new(self: M, other: "Measurement", result_unit: U) -> M:
        return type(self).sum_and_return_new(self, other, result_unit)

    def subtract_and_return_new(self: M, other: "Measurement", result_unit: U) -> M:
        return type(self).difference_and_return_new(self, other, result_unit)

    def add_value_and_return_new(self: M, value: Any, unit: U, result_unit: U) -> M:
        return type(self)(self.add_values(self.value, self.unit, value, unit, result_unit), result_unit)

    def subtract_value_and_return_new(self: M, value: Any, unit: U, result_unit: U) -> M:
        return type(self)(self.subtract_values(self.value, self.unit, value, unit, result_unit), result_unit)

    def add(self, other: "Measurement") -> None:
        """Add *other* to this measurement in place, keeping the current unit."""

        self.add_measurements(self, other, self)

    def subtract(self, other: "Measurement") -> None:
        self.subtract_measurements(self, other, self)

    def add_value(self, value: Any, unit: U) -> None:
        self.value = self.add_values(self.value, self.unit, value, unit, self.unit)

    def subtract_value(self, value: Any, unit: U) -> None:
        self.value = self.subtract_values(self.value, self.unit, value, unit, self.unit)

    def add_to(self, other: "Measurement", result: "Measurement") -> None:
        """Write ``self + other`` into *result*; neither operand changes."""

        self.add_measurements(self, other, result)

    def subtract_to(self, other: "Measurement", result: "Measurement") -> None:
        self.subtract_measurements(self, other, result)

    def __add__(self: M, other: object) -> M:
        if not isinstance(other, Measurement) or other.unit_type is not self.unit_type:
            return NotImplemented
        return self.add_and_return_new(other, self.unit)

    def __sub__(self: M, other: object) -> M:
        if not isinstance(other, Measurement) or other.unit_type is not self.unit_type:
            return NotImplemented
        return self.subtract_and_return_new(other, self.unit)

    # ------------------------------------------------------------------ display
    def __repr__(self) -> str:
        unit = f"{type(self._unit).__name__}.{self._unit.name}" if self._unit is not None else None
        return f"{type(self).__name__}(value={self._value!r}, unit={unit})"

    def __str__(self) -> str:
        if not self.is_set():
            return repr(self)
        return f"{self._value} {self._unit.symbol}"

    def format_and_convert(self, system: UnitSystem | None = None, *, digits: int = formatting.DEFAULT_DIGITS) -> str:
        """Render this measurement in the most readable unit of *system*.

        ``Distance(1500, DistanceUnit.METER).format_and_convert()`` gives ``"1.5 km"``.
        """

        return formatting.format_and_convert(self, system, digits=digits)


__all__ = ["Measurement", "QUANTITY_TYPES", "to_decimal"]
