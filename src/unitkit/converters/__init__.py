"""Per-quantity converters."""

from .base import Converter, LinearConverter
from .acceleration import (
    ACCELERATION_CONVERTER,
    STANDARD_GRAVITY,
    feet_per_squared_second_to_meters_per_squared_second,
    gravity_to_meters_per_squared_second,
    meters_per_squared_second_to_feet_per_squared_second,
    meters_per_squared_second_to_gravity,
)
from .angle import ANGLE_CONVERTER, AngleConverter, degrees_to_radians, radians_to_degrees
from .temperature import (
    ABSOLUTE_ZERO,
    TEMPERATURE_CONVERTER,
    TemperatureConverter,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)
from .registry import (
    ANGULAR_ACCELERATION_CONVERTER,
    ANGULAR_SPEED_CONVERTER,
    DISTANCE_CONVERTER,
    FREQUENCY_CONVERTER,
    MAGNETIC_FLUX_DENSITY_CONVERTER,
    SPEED_CONVERTER,
    SURFACE_CONVERTER,
    TIME_CONVERTER,
    VOLUME_CONVERTER,
    WEIGHT_CONVERTER,
    converter_for,
)

__all__ = [
    "ABSOLUTE_ZERO",
    "ACCELERATION_CONVERTER",
    "ANGLE_CONVERTER",
    "ANGULAR_ACCELERATION_CONVERTER",
    "ANGULAR_SPEED_CONVERTER",
    "AngleConverter",
    "Converter",
    "DISTANCE_CONVERTER",
    "FREQUENCY_CONVERTER",
    "LinearConverter",
    "MAGNETIC_FLUX_DENSITY_CONVERTER",
    "SPEED_CONVERTER",
    "STANDARD_GRAVITY",
    "SURFACE_CONVERTER",
    "TEMPERATURE_CONVERTER",
    "TIME_CONVERTER",
    "TemperatureConverter",
    "VOLUME_CONVERTER",
    "WEIGHT_CONVERTER",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "converter_for",
    "degrees_to_radians",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "feet_per_squared_second_to_meters_per_squared_second",
    "gravity_to_meters_per_squared_second",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
    "meters_per_squared_second_to_feet_per_squared_second",
    "meters_per_squared_second_to_gravity",
    "radians_to_degrees",
]
