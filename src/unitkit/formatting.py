"""Rendering of values in the most readable unit of a unit system.

Each quantity with a scale of related units defines a ladder per unit system,
ordered from the smallest unit to the largest.  A value is shown in the first
unit of the ladder whose magnitude stays below one of the next unit; the last
unit takes whatever is left (``1500 m`` becomes ``1.5 km``).  Quantities
without such a scale (angles, temperatures) are shown in their own unit.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import numpy as np

from .converters import converter_for
from .errors import InvalidArgumentError
from .settings import decimal_context
from .unit_system import MetricImperialUnit, QuantityUnit, UnitSystem
from .unit_types import (
    AccelerationUnit,
    DistanceUnit,
    FrequencyUnit,
    MagneticFluxDensityUnit,
    SpeedUnit,
    SurfaceUnit,
    TimeUnit,
    VolumeUnit,
    WeightUnit,
)

if TYPE_CHECKING:  # pragma: no cover
    from .measurement import Measurement


DEFAULT_DIGITS = 3

_METRIC = UnitSystem.METRIC
_IMPERIAL = UnitSystem.IMPERIAL

_LADDERS: Dict[type, Dict[UnitSystem, Tuple[QuantityUnit, ...]]] = {
    TimeUnit: {
        _METRIC: (
            TimeUnit.NANOSECOND,
            TimeUnit.MICROSECOND,
            TimeUnit.MILLISECOND,
            TimeUnit.SECOND,
            TimeUnit.MINUTE,
            TimeUnit.HOUR,
            TimeUnit.DAY,
            TimeUnit.WEEK,
            TimeUnit.MONTH,
            TimeUnit.YEAR,
            TimeUnit.CENTURY,
        ),
    },
    WeightUnit: {
        _METRIC: (
            WeightUnit.PICOGRAM,
            WeightUnit.NANOGRAM,
            WeightUnit.MICROGRAM,
            WeightUnit.MILLIGRAM,
            WeightUnit.GRAM,
            WeightUnit.KILOGRAM,
            WeightUnit.TONNE,
            WeightUnit.MEGATONNE,
        ),
        _IMPERIAL: (WeightUnit.OUNCE, WeightUnit.POUND, WeightUnit.US_TON),
    },
    DistanceUnit: {
        _METRIC: (DistanceUnit.MILLIMETER, DistanceUnit.CENTIMETER, DistanceUnit.METER, DistanceUnit.KILOMETER),
        _IMPERIAL: (DistanceUnit.INCH, DistanceUnit.FOOT, DistanceUnit.YARD, DistanceUnit.MILE),
    },
    SpeedUnit: {
        _METRIC: (SpeedUnit.METERS_PER_SECOND, SpeedUnit.KILOMETERS_PER_HOUR, SpeedUnit.KILOMETERS_PER_SECOND),
        _IMPERIAL: (SpeedUnit.FEET_PER_SECOND, SpeedUnit.MILES_PER_HOUR),
    },
    AccelerationUnit: {
        _METRIC: (AccelerationUnit.METERS_PER_SQUARED_SECOND,),
        _IMPERIAL: (AccelerationUnit.FEET_PER_SQUARED_SECOND,),
    },
    SurfaceUnit: {
        _METRIC: (
            SurfaceUnit.SQUARE_MILLIMETER,
            SurfaceUnit.SQUARE_CENTIMETER,
            SurfaceUnit.SQUARE_METER,
            SurfaceUnit.SQUARE_KILOMETER,
        ),
        _IMPERIAL: (
            SurfaceUnit.SQUARE_INCH,
            SurfaceUnit.SQUARE_FOOT,
            SurfaceUnit.SQUARE_YARD,
            SurfaceUnit.SQUARE_MILE,
        ),
    },
    VolumeUnit: {
        _METRIC: (VolumeUnit.CUBIC_CENTIMETER, VolumeUnit.LITER, VolumeUnit.HECTOLITER, VolumeUnit.CUBIC_METER),
        _IMPERIAL: (
            VolumeUnit.CUBIC_INCH,
            VolumeUnit.PINT,
            VolumeUnit.GALLON,
            VolumeUnit.CUBIC_FOOT,
            VolumeUnit.BARREL,
        ),
    },
    FrequencyUnit: {
        _METRIC: (
            FrequencyUnit.HERTZ,
            FrequencyUnit.KILOHERTZ,
            FrequencyUnit.MEGAHERTZ,
            FrequencyUnit.GIGAHERTZ,
            FrequencyUnit.TERAHERTZ,
        ),
    },
    MagneticFluxDensityUnit: {
        _METRIC: (
            MagneticFluxDensityUnit.NANOTESLA,
            MagneticFluxDensityUnit.MICROTESLA,
            MagneticFluxDensityUnit.MILLITESLA,
            MagneticFluxDensityUnit.TESLA,
            MagneticFluxDensityUnit.KILOTESLA,
            MagneticFluxDensityUnit.MEGATESLA,
            MagneticFluxDensityUnit.GIGATESLA,
        ),
    },
}


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def _default_system(unit: QuantityUnit) -> UnitSystem:
    if isinstance(unit, MetricImperialUnit):
        return unit.system
    return _METRIC


def _ladder(unit: QuantityUnit, system: UnitSystem) -> Optional[Tuple[QuantityUnit, ...]]:
    ladders = _LADDERS.get(type(unit))
    if ladders is None:
        return None
    # quantities with a single scale use it for every system
    return ladders.get(system, ladders[_METRIC])


def format_number(value: Any, digits: int = DEFAULT_DIGITS) -> str:
    """Render *value* with at most *digits* fraction digits and no trailing zeros."""

    if isinstance(value, Decimal):
        with decimal_context():
            rounded = round(value, digits).normalize()
        return f"{rounded:f}"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return np.format_float_positional(float(value), precision=digits, unique=True, trim="-")


def format_value(value: Any, unit: QuantityUnit, digits: int = DEFAULT_DIGITS) -> str:
    """Render *value* in *unit* as ``"<value> <symbol>"`` without converting it."""

    return f"{format_number(value, digits)} {unit.symbol}"


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------


def format_value_and_convert(
    value: Any,
    unit: QuantityUnit,
    system: UnitSystem | None = None,
    *,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Render *value* (expressed in *unit*) in the most readable unit of *system*.

    *system* defaults to the system *unit* belongs to.  Imperial weights end
    with the US ton.
    """

    converter = converter_for(unit)
    unit = converter.unit_type.validate(unit)
    if value is None:
        raise InvalidArgumentError("A value is required for formatting.")
    if system is None:
        system = _default_system(unit)
    elif not isinstance(system, UnitSystem):
        raise InvalidArgumentError(f"Expected a UnitSystem, got {system!r}.")

    ladder = _ladder(unit, system)
    if ladder is None:
        return format_value(value, unit, digits)

    factors = converter.decimal_factors
    for candidate, larger in zip(ladder, ladder[1:]):
        converted = converter.convert(value, unit, candidate)
        # thresholds come from the exact factors so 12 in reads as 1 ft
        with decimal_context():
            limit = factors[larger] / factors[candidate]
        if not isinstance(converted, Decimal):
            limit = float(limit)
        if abs(converted) < limit:
            return format_value(converted, candidate, digits)
    last = ladder[-1]
    return format_value(converter.convert(value, unit, last), last, digits)


def format_and_convert(
    measurement: "Measurement",
    system: UnitSystem | None = None,
    *,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Render *measurement* in the most readable unit of *system*."""

    if not measurement.is_set():
        raise InvalidArgumentError("Cannot format a measurement without value and unit.")
    return format_value_and_convert(measurement.value, measurement.unit, system, digits=digits)


__all__ = [
    "DEFAULT_DIGITS",
    "format_and_convert",
    "format_number",
    "format_value",
    "format_value_and_convert",
]
