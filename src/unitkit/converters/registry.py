"""One converter per quantity, looked up by unit type."""

from __future__ import annotations

from typing import Any, Dict

from .. import constants as c
from ..errors import InvalidArgumentError
from ..unit_system import QuantityUnit
from ..unit_types import (
    AngularAccelerationUnit,
    AngularSpeedUnit,
    DistanceUnit,
    FrequencyUnit,
    MagneticFluxDensityUnit,
    SpeedUnit,
    SurfaceUnit,
    TimeUnit,
    VolumeUnit,
    WeightUnit,
)
from .acceleration import ACCELERATION_CONVERTER
from .angle import ANGLE_CONVERTER
from .base import Converter, LinearConverter
from .temperature import TEMPERATURE_CONVERTER


TIME_CONVERTER = LinearConverter(
    TimeUnit,
    {
        TimeUnit.SECOND: 1,
        TimeUnit.NANOSECOND: c.SECONDS_PER_NANOSECOND,
        TimeUnit.MICROSECOND: c.SECONDS_PER_MICROSECOND,
        TimeUnit.MILLISECOND: c.SECONDS_PER_MILLISECOND,
        TimeUnit.MINUTE: c.SECONDS_PER_MINUTE,
        TimeUnit.HOUR: c.SECONDS_PER_HOUR,
        TimeUnit.DAY: c.SECONDS_PER_DAY,
        TimeUnit.WEEK: c.SECONDS_PER_WEEK,
        TimeUnit.MONTH: c.SECONDS_PER_MONTH,
        TimeUnit.YEAR: c.SECONDS_PER_YEAR,
        TimeUnit.CENTURY: c.SECONDS_PER_CENTURY,
    },
)

WEIGHT_CONVERTER = LinearConverter(
    WeightUnit,
    {
        WeightUnit.KILOGRAM: 1,
        WeightUnit.PICOGRAM: c.KILOGRAMS_PER_PICOGRAM,
        WeightUnit.NANOGRAM: c.KILOGRAMS_PER_NANOGRAM,
        WeightUnit.MICROGRAM: c.KILOGRAMS_PER_MICROGRAM,
        WeightUnit.MILLIGRAM: c.KILOGRAMS_PER_MILLIGRAM,
        WeightUnit.GRAM: c.KILOGRAMS_PER_GRAM,
        WeightUnit.TONNE: c.KILOGRAMS_PER_TONNE,
        WeightUnit.MEGATONNE: c.KILOGRAMS_PER_MEGATONNE,
        WeightUnit.US_TON: c.KILOGRAMS_PER_US_TON,
        WeightUnit.UK_TON: c.KILOGRAMS_PER_UK_TON,
        WeightUnit.POUND: c.KILOGRAMS_PER_POUND,
        WeightUnit.OUNCE: c.KILOGRAMS_PER_OUNCE,
    },
)

DISTANCE_CONVERTER = LinearConverter(
    DistanceUnit,
    {
        DistanceUnit.METER: 1,
        DistanceUnit.MILLIMETER: c.METERS_PER_MILLIMETER,
        DistanceUnit.CENTIMETER: c.METERS_PER_CENTIMETER,
        DistanceUnit.KILOMETER: c.METERS_PER_KILOMETER,
        DistanceUnit.INCH: c.METERS_PER_INCH,
        DistanceUnit.FOOT: c.METERS_PER_FOOT,
        DistanceUnit.YARD: c.METERS_PER_YARD,
        DistanceUnit.MILE: c.METERS_PER_MILE,
    },
)

SPEED_CONVERTER = LinearConverter(
    SpeedUnit,
    {
        SpeedUnit.METERS_PER_SECOND: 1,
        SpeedUnit.KILOMETERS_PER_HOUR: c.METERS_PER_SECOND_PER_KILOMETER_PER_HOUR,
        SpeedUnit.KILOMETERS_PER_SECOND: c.METERS_PER_SECOND_PER_KILOMETER_PER_SECOND,
        SpeedUnit.FEET_PER_SECOND: c.METERS_PER_SECOND_PER_FOOT_PER_SECOND,
        SpeedUnit.MILES_PER_HOUR: c.METERS_PER_SECOND_PER_MILE_PER_HOUR,
    },
)

ANGULAR_SPEED_CONVERTER = LinearConverter(
    AngularSpeedUnit,
    {
        AngularSpeedUnit.RADIANS_PER_SECOND: 1,
        AngularSpeedUnit.DEGREES_PER_SECOND: c.RADIANS_PER_DEGREE,
    },
)

ANGULAR_ACCELERATION_CONVERTER = LinearConverter(
    AngularAccelerationUnit,
    {
        AngularAccelerationUnit.RADIANS_PER_SQUARED_SECOND: 1,
        AngularAccelerationUnit.DEGREES_PER_SQUARED_SECOND: c.RADIANS_PER_DEGREE,
    },
)

SURFACE_CONVERTER = LinearConverter(
    SurfaceUnit,
    {
        SurfaceUnit.SQUARE_METER: 1,
        SurfaceUnit.SQUARE_MILLIMETER: c.SQUARE_METERS_PER_SQUARE_MILLIMETER,
        SurfaceUnit.SQUARE_CENTIMETER: c.SQUARE_METERS_PER_SQUARE_CENTIMETER,
        SurfaceUnit.SQUARE_KILOMETER: c.SQUARE_METERS_PER_SQUARE_KILOMETER,
        SurfaceUnit.SQUARE_INCH: c.SQUARE_METERS_PER_SQUARE_INCH,
        SurfaceUnit.SQUARE_FOOT: c.SQUARE_METERS_PER_SQUARE_FOOT,
        SurfaceUnit.SQUARE_YARD: c.SQUARE_METERS_PER_SQUARE_YARD,
        SurfaceUnit.SQUARE_MILE: c.SQUARE_METERS_PER_SQUARE_MILE,
        SurfaceUnit.CENTIARE: c.SQUARE_METERS_PER_CENTIARE,
        SurfaceUnit.ARE: c.SQUARE_METERS_PER_ARE,
        SurfaceUnit.DECARE: c.SQUARE_METERS_PER_DECARE,
        SurfaceUnit.HECTARE: c.SQUARE_METERS_PER_HECTARE,
        SurfaceUnit.ACRE: c.SQUARE_METERS_PER_ACRE,
    },
)

VOLUME_CONVERTER = LinearConverter(
    VolumeUnit,
    {
        VolumeUnit.CUBIC_METER: 1,
        VolumeUnit.CUBIC_CENTIMETER: c.CUBIC_METERS_PER_CUBIC_CENTIMETER,
        VolumeUnit.MILLILITER: c.CUBIC_METERS_PER_MILLILITER,
        VolumeUnit.CUBIC_DECIMETER: c.CUBIC_METERS_PER_CUBIC_DECIMETER,
        VolumeUnit.LITER: c.CUBIC_METERS_PER_LITER,
        VolumeUnit.HECTOLITER: c.CUBIC_METERS_PER_HECTOLITER,
        VolumeUnit.CUBIC_INCH: c.CUBIC_METERS_PER_CUBIC_INCH,
        VolumeUnit.PINT: c.CUBIC_METERS_PER_PINT,
        VolumeUnit.GALLON: c.CUBIC_METERS_PER_GALLON,
        VolumeUnit.CUBIC_FOOT: c.CUBIC_METERS_PER_CUBIC_FOOT,
        VolumeUnit.BARREL: c.CUBIC_METERS_PER_BARREL,
    },
)

FREQUENCY_CONVERTER = LinearConverter(
    FrequencyUnit,
    {
        FrequencyUnit.HERTZ: 1,
        FrequencyUnit.KILOHERTZ: c.HERTZ_PER_KILOHERTZ,
        FrequencyUnit.MEGAHERTZ: c.HERTZ_PER_MEGAHERTZ,
        FrequencyUnit.GIGAHERTZ: c.HERTZ_PER_GIGAHERTZ,
        FrequencyUnit.TERAHERTZ: c.HERTZ_PER_TERAHERTZ,
    },
)

MAGNETIC_FLUX_DENSITY_CONVERTER = LinearConverter(
    MagneticFluxDensityUnit,
    {
        MagneticFluxDensityUnit.TESLA: 1,
        MagneticFluxDensityUnit.NANOTESLA: c.TESLAS_PER_NANOTESLA,
        MagneticFluxDensityUnit.MICROTESLA: c.TESLAS_PER_MICROTESLA,
        MagneticFluxDensityUnit.MILLITESLA: c.TESLAS_PER_MILLITESLA,
        MagneticFluxDensityUnit.KILOTESLA: c.TESLAS_PER_KILOTESLA,
        MagneticFluxDensityUnit.MEGATESLA: c.TESLAS_PER_MEGATESLA,
        MagneticFluxDensityUnit.GIGATESLA: c.TESLAS_PER_GIGATESLA,
    },
)


_CONVERTERS: Dict[type, Converter] = {
    converter.unit_type: converter
    for converter in (
        TIME_CONVERTER,
        WEIGHT_CONVERTER,
        DISTANCE_CONVERTER,
        SPEED_CONVERTER,
        ACCELERATION_CONVERTER,
        ANGULAR_SPEED_CONVERTER,
        ANGULAR_ACCELERATION_CONVERTER,
        TEMPERATURE_CONVERTER,
        SURFACE_CONVERTER,
        VOLUME_CONVERTER,
        ANGLE_CONVERTER,
        FREQUENCY_CONVERTER,
        MAGNETIC_FLUX_DENSITY_CONVERTER,
    )
}


def converter_for(unit: Any) -> Converter:
    """Return the converter handling *unit* (a unit member or a unit enum class)."""

    unit_type = unit if isinstance(unit, type) else type(unit)
    if unit is None or not issubclass(unit_type, QuantityUnit):
        raise InvalidArgumentError(f"Not a unit: {unit!r}.")
    try:
        return _CONVERTERS[unit_type]
    except KeyError as exc:
        raise InvalidArgumentError(f"No converter registered for {unit_type.__name__}.") from exc


__all__ = [
    "ANGULAR_ACCELERATION_CONVERTER",
    "ANGULAR_SPEED_CONVERTER",
    "DISTANCE_CONVERTER",
    "FREQUENCY_CONVERTER",
    "MAGNETIC_FLUX_DENSITY_CONVERTER",
    "SPEED_CONVERTER",
    "SURFACE_CONVERTER",
    "TIME_CONVERTER",
    "VOLUME_CONVERTER",
    "WEIGHT_CONVERTER",
    "converter_for",
]
