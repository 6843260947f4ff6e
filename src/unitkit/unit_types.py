"""Closed unit enumerations, one per physical quantity.

The first member of every enumeration is the SI base unit that converters use
as pivot.  Each member carries its display symbol and its classification.
"""

from __future__ import annotations

from enum import unique

from .unit_system import InternationalSystemUnit, MetricImperialUnit, UnitSystem


_METRIC = UnitSystem.METRIC
_IMPERIAL = UnitSystem.IMPERIAL


@unique
class TimeUnit(InternationalSystemUnit):
    SECOND = ("s", True)
    NANOSECOND = ("ns", True)
    MICROSECOND = ("µs", True)
    MILLISECOND = ("ms", True)
    MINUTE = ("min", False)
    HOUR = ("h", False)
    DAY = ("d", False)
    WEEK = ("wk", False)
    MONTH = ("mon", False)
    YEAR = ("yr", False)
    CENTURY = ("c.", False)


@unique
class WeightUnit(MetricImperialUnit):
    KILOGRAM = ("kg", _METRIC)
    PICOGRAM = ("pg", _METRIC)
    NANOGRAM = ("ng", _METRIC)
    MICROGRAM = ("µg", _METRIC)
    MILLIGRAM = ("mg", _METRIC)
    GRAM = ("g", _METRIC)
    TONNE = ("t", _METRIC)
    MEGATONNE = ("Mt", _METRIC)
    US_TON = ("ton (US)", _IMPERIAL)
    UK_TON = ("ton (UK)", _IMPERIAL)
    POUND = ("lb", _IMPERIAL)
    OUNCE = ("oz", _IMPERIAL)


@unique
class DistanceUnit(MetricImperialUnit):
    METER = ("m", _METRIC)
    MILLIMETER = ("mm", _METRIC)
    CENTIMETER = ("cm", _METRIC)
    KILOMETER = ("km", _METRIC)
    INCH = ("in", _IMPERIAL)
    FOOT = ("ft", _IMPERIAL)
    YARD = ("yd", _IMPERIAL)
    MILE = ("mi", _IMPERIAL)


@unique
class SpeedUnit(MetricImperialUnit):
    METERS_PER_SECOND = ("m/s", _METRIC)
    KILOMETERS_PER_HOUR = ("km/h", _METRIC)
    KILOMETERS_PER_SECOND = ("km/s", _METRIC)
    FEET_PER_SECOND = ("ft/s", _IMPERIAL)
    MILES_PER_HOUR = ("mph", _IMPERIAL)


@unique
class AccelerationUnit(MetricImperialUnit):
    METERS_PER_SQUARED_SECOND = ("m/s²", _METRIC)
    G = ("g₀", _METRIC)
    FEET_PER_SQUARED_SECOND = ("ft/s²", _IMPERIAL)


@unique
class AngularSpeedUnit(MetricImperialUnit):
    RADIANS_PER_SECOND = ("rad/s", _METRIC)
    DEGREES_PER_SECOND = ("°/s", _METRIC)


@unique
class AngularAccelerationUnit(MetricImperialUnit):
    RADIANS_PER_SQUARED_SECOND = ("rad/s²", _METRIC)
    DEGREES_PER_SQUARED_SECOND = ("°/s²", _METRIC)


@unique
class TemperatureUnit(MetricImperialUnit):
    KELVIN = ("K", _METRIC)
    CELSIUS = ("°C", _METRIC)
    FAHRENHEIT = ("°F", _IMPERIAL)


@unique
class SurfaceUnit(MetricImperialUnit):
    SQUARE_METER = ("m²", _METRIC)
    SQUARE_MILLIMETER = ("mm²", _METRIC)
    SQUARE_CENTIMETER = ("cm²", _METRIC)
    SQUARE_KILOMETER = ("km²", _METRIC)
    SQUARE_INCH = ("sq in", _IMPERIAL)
    SQUARE_FOOT = ("sq ft", _IMPERIAL)
    SQUARE_YARD = ("sq yd", _IMPERIAL)
    SQUARE_MILE = ("sq mi", _IMPERIAL)
    CENTIARE = ("ca", _METRIC)
    ARE = ("a", _METRIC)
    DECARE = ("daa", _METRIC)
    HECTARE = ("ha", _METRIC)
    ACRE = ("acre", _IMPERIAL)


@unique
class VolumeUnit(MetricImperialUnit):
    CUBIC_METER = ("m³", _METRIC)
    CUBIC_CENTIMETER = ("cm³", _METRIC)
    MILLILITER = ("mL", _METRIC)
    CUBIC_DECIMETER = ("dm³", _METRIC)
    LITER = ("L", _METRIC)
    HECTOLITER = ("hL", _METRIC)
    CUBIC_INCH = ("in³", _IMPERIAL)
    PINT = ("pt", _IMPERIAL)
    GALLON = ("gal", _IMPERIAL)
    CUBIC_FOOT = ("ft³", _IMPERIAL)
    BARREL = ("bbl", _IMPERIAL)


@unique
class AngleUnit(MetricImperialUnit):
    RADIANS = ("rad", _METRIC)
    DEGREES = ("°", _METRIC)


@unique
class FrequencyUnit(MetricImperialUnit):
    HERTZ = ("Hz", _METRIC)
    KILOHERTZ = ("kHz", _METRIC)
    MEGAHERTZ = ("MHz", _METRIC)
    GIGAHERTZ = ("GHz", _METRIC)
    TERAHERTZ = ("THz", _METRIC)


@unique
class MagneticFluxDensityUnit(MetricImperialUnit):
    TESLA = ("T", _METRIC)
    NANOTESLA = ("nT", _METRIC)
    MICROTESLA = ("µT", _METRIC)
    MILLITESLA = ("mT", _METRIC)
    KILOTESLA = ("kT", _METRIC)
    MEGATESLA = ("MT", _METRIC)
    GIGATESLA = ("GT", _METRIC)


__all__ = [
    "AccelerationUnit",
    "AngleUnit",
    "AngularAccelerationUnit",
    "AngularSpeedUnit",
    "DistanceUnit",
    "FrequencyUnit",
    "MagneticFluxDensityUnit",
    "SpeedUnit",
    "SurfaceUnit",
    "TemperatureUnit",
    "TimeUnit",
    "VolumeUnit",
    "WeightUnit",
]
