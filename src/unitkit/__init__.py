"""Physical measurements and unit conversion."""

from . import constants, converters
from .dispatch import convert
from .errors import InvalidArgumentError
from .formatting import format_and_convert, format_value_and_convert
from .measurement import Measurement
from .quantities import (
    Acceleration,
    Angle,
    AngularAcceleration,
    AngularSpeed,
    Distance,
    Frequency,
    MagneticFluxDensity,
    Speed,
    Surface,
    Temperature,
    Time,
    Volume,
    Weight,
)
from .serialization import deserialize, from_dict, serialize, to_dict
from .settings import ConversionSettings, configure, get_settings
from .unit_system import UnitSystem
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

__all__ = [
    "Acceleration",
    "AccelerationUnit",
    "Angle",
    "AngleUnit",
    "AngularAcceleration",
    "AngularAccelerationUnit",
    "AngularSpeed",
    "AngularSpeedUnit",
    "ConversionSettings",
    "Distance",
    "DistanceUnit",
    "Frequency",
    "FrequencyUnit",
    "InvalidArgumentError",
    "MagneticFluxDensity",
    "MagneticFluxDensityUnit",
    "Measurement",
    "Speed",
    "SpeedUnit",
    "Surface",
    "SurfaceUnit",
    "Temperature",
    "TemperatureUnit",
    "Time",
    "TimeUnit",
    "UnitSystem",
    "Volume",
    "VolumeUnit",
    "Weight",
    "WeightUnit",
    "configure",
    "constants",
    "convert",
    "converters",
    "deserialize",
    "format_and_convert",
    "format_value_and_convert",
    "from_dict",
    "get_settings",
    "serialize",
    "to_dict",
]
