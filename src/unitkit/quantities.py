"""Measurement types, one per physical quantity."""

from __future__ import annotations

from typing import Any, Tuple

from .converters import (
    ACCELERATION_CONVERTER,
    ANGLE_CONVERTER,
    ANGULAR_ACCELERATION_CONVERTER,
    ANGULAR_SPEED_CONVERTER,
    DISTANCE_CONVERTER,
    FREQUENCY_CONVERTER,
    MAGNETIC_FLUX_DENSITY_CONVERTER,
    SPEED_CONVERTER,
    SURFACE_CONVERTER,
    TEMPERATURE_CONVERTER,
    TIME_CONVERTER,
    VOLUME_CONVERTER,
    WEIGHT_CONVERTER,
)
from .measurement import Measurement
from .unit_types import (
    AccelerationUnit,
    AngleUnit,
    AngularAccelerationUnit,
    AngularSpeedUnit,
    DistanceUnit,
    FrequencyUnit,
    MagneticFluxDensityUnit,
    SpeedUnit,
    SurfaceUnit,
    TemperatureUnit,
    TimeUnit,
    VolumeUnit,
    WeightUnit,
)


class Time(Measurement[TimeUnit], unit_type=TimeUnit, converter=TIME_CONVERTER):
    """Duration."""


class Weight(Measurement[WeightUnit], unit_type=WeightUnit, converter=WEIGHT_CONVERTER):
    """Mass, in the everyday sense of weight."""


class Distance(Measurement[DistanceUnit], unit_type=DistanceUnit, converter=DISTANCE_CONVERTER):
    pass


class Speed(Measurement[SpeedUnit], unit_type=SpeedUnit, converter=SPEED_CONVERTER):
    pass


class Acceleration(Measurement[AccelerationUnit], unit_type=AccelerationUnit, converter=ACCELERATION_CONVERTER):
    pass


class AngularSpeed(Measurement[AngularSpeedUnit], unit_type=AngularSpeedUnit, converter=ANGULAR_SPEED_CONVERTER):
    pass


class AngularAcceleration(
    Measurement[AngularAccelerationUnit],
    unit_type=AngularAccelerationUnit,
    converter=ANGULAR_ACCELERATION_CONVERTER,
):
    pass


class Temperature(Measurement[TemperatureUnit], unit_type=TemperatureUnit, converter=TEMPERATURE_CONVERTER):
    """Temperature on the Celsius, Fahrenheit or Kelvin scale.

    Arithmetic converts both operands to the result scale before combining
    them, so adding two absolute temperatures on an offset scale (Celsius,
    Fahrenheit) depends on the scale chosen.
    """


class Surface(Measurement[SurfaceUnit], unit_type=SurfaceUnit, converter=SURFACE_CONVERTER):
    pass


class Volume(Measurement[VolumeUnit], unit_type=VolumeUnit, converter=VOLUME_CONVERTER):
    pass


class Angle(Measurement[AngleUnit], unit_type=AngleUnit, converter=ANGLE_CONVERTER):
    """Plane angle, with sexagesimal helpers."""

    def to_degrees_and_minutes(self) -> Tuple[Any, Any]:
        return ANGLE_CONVERTER.to_degrees_and_minutes(self.value, self.unit)

    def to_degrees_minutes_and_seconds(self) -> Tuple[Any, Any, Any]:
        return ANGLE_CONVERTER.to_degrees_minutes_and_seconds(self.value, self.unit)

    @classmethod
    def from_degrees_and_minutes(cls, degrees: Any, minutes: Any, unit: AngleUnit = AngleUnit.DEGREES) -> "Angle":
        return cls(ANGLE_CONVERTER.from_degrees_and_minutes(degrees, minutes, unit), unit)

    @classmethod
    def from_degrees_minutes_and_seconds(
        cls, degrees: Any, minutes: Any, seconds: Any, unit: AngleUnit = AngleUnit.DEGREES
    ) -> "Angle":
        return cls(ANGLE_CONVERTER.from_degrees_minutes_and_seconds(degrees, minutes, seconds, unit), unit)


class Frequency(Measurement[FrequencyUnit], unit_type=FrequencyUnit, converter=FREQUENCY_CONVERTER):
    pass


class MagneticFluxDensity(
    Measurement[MagneticFluxDensityUnit],
    unit_type=MagneticFluxDensityUnit,
    converter=MAGNETIC_FLUX_DENSITY_CONVERTER,
):
    pass


__all__ = [
    "Acceleration",
    "Angle",
    "AngularAcceleration",
    "AngularSpeed",
    "Distance",
    "Frequency",
    "MagneticFluxDensity",
    "Speed",
    "Surface",
    "Temperature",
    "Time",
    "Volume",
    "Weight",
]
