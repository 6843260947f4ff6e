from decimal import Decimal

import pytest

import unitkit
from unitkit import (
    AccelerationUnit,
    DistanceUnit,
    InvalidArgumentError,
    SurfaceUnit,
    TemperatureUnit,
    TimeUnit,
    WeightUnit,
)


def test_dispatch_matches_the_quantity_converter():
    assert unitkit.convert(1.0, DistanceUnit.MILE, DistanceUnit.KILOMETER) == pytest.approx(1.609344)
    assert unitkit.convert(100.0, TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT) == pytest.approx(212.0)
    assert unitkit.convert(2.0, AccelerationUnit.G, AccelerationUnit.METERS_PER_SQUARED_SECOND) == pytest.approx(19.6133)
    assert unitkit.convert(1.0, SurfaceUnit.SQUARE_KILOMETER, SurfaceUnit.HECTARE) == pytest.approx(100.0)
    assert unitkit.convert(Decimal("90"), TimeUnit.MINUTE, TimeUnit.HOUR) == Decimal("1.5")


def test_dispatch_identity():
    value = 42.0
    assert unitkit.convert(value, WeightUnit.OUNCE, WeightUnit.OUNCE) is value


def test_dispatch_rejects_mixed_or_missing_units():
    with pytest.raises(InvalidArgumentError):
        unitkit.convert(1.0, DistanceUnit.METER, TimeUnit.SECOND)
    with pytest.raises(InvalidArgumentError):
        unitkit.convert(1.0, None, DistanceUnit.METER)
    with pytest.raises(InvalidArgumentError):
        unitkit.convert(1.0, DistanceUnit.METER, None)
    with pytest.raises(InvalidArgumentError):
        unitkit.convert(None, DistanceUnit.METER, DistanceUnit.FOOT)


def test_dispatch_rejects_unit_classes():
    with pytest.raises(InvalidArgumentError):
        unitkit.convert(1.0, DistanceUnit, DistanceUnit.METER)
