"""Acceleration conversion.

Meters per squared second is the pivot: standard gravity (``G``) maps onto it
through ``STANDARD_GRAVITY`` and feet per squared second through the length of
a foot, so feet <-> G always takes two steps.
"""

from __future__ import annotations

from typing import Any

from .. import constants
from ..unit_types import AccelerationUnit
from .base import LinearConverter


STANDARD_GRAVITY = float(constants.STANDARD_GRAVITY)
METERS_PER_FOOT = float(constants.METERS_PER_FOOT)

ACCELERATION_CONVERTER = LinearConverter(
    AccelerationUnit,
    {
        AccelerationUnit.METERS_PER_SQUARED_SECOND: 1,
        AccelerationUnit.G: constants.STANDARD_GRAVITY,
        AccelerationUnit.FEET_PER_SQUARED_SECOND: constants.METERS_PER_FOOT,
    },
)

_MPS2 = AccelerationUnit.METERS_PER_SQUARED_SECOND


def feet_per_squared_second_to_meters_per_squared_second(value: Any) -> Any:
    return ACCELERATION_CONVERTER.convert(value, AccelerationUnit.FEET_PER_SQUARED_SECOND, _MPS2)


def meters_per_squared_second_to_feet_per_squared_second(value: Any) -> Any:
    return ACCELERATION_CONVERTER.convert(value, _MPS2, AccelerationUnit.FEET_PER_SQUARED_SECOND)


def gravity_to_meters_per_squared_second(value: Any) -> Any:
    return ACCELERATION_CONVERTER.convert(value, AccelerationUnit.G, _MPS2)


def meters_per_squared_second_to_gravity(value: Any) -> Any:
    return ACCELERATION_CONVERTER.convert(value, _MPS2, AccelerationUnit.G)


__all__ = [
    "ACCELERATION_CONVERTER",
    "METERS_PER_FOOT",
    "STANDARD_GRAVITY",
    "feet_per_squared_second_to_meters_per_squared_second",
    "gravity_to_meters_per_squared_second",
    "meters_per_squared_second_to_feet_per_squared_second",
    "meters_per_squared_second_to_gravity",
]
