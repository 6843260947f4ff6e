from decimal import Decimal

import numpy as np
import pytest

from unitkit import Angle, AngleUnit, converters

ERROR = 1e-6


def test_degrees_and_radians():
    assert converters.degrees_to_radians(180.0) == pytest.approx(np.pi)
    assert converters.radians_to_degrees(np.pi / 4) == pytest.approx(45.0)
    assert Angle(90.0, AngleUnit.DEGREES).value_in(AngleUnit.RADIANS) == pytest.approx(np.pi / 2)


def test_split_into_degrees_minutes_and_seconds():
    degrees, minutes, seconds = converters.ANGLE_CONVERTER.to_degrees_minutes_and_seconds(30.5125, AngleUnit.DEGREES)
    assert degrees == 30
    assert minutes == 30
    assert seconds == pytest.approx(45.0, abs=ERROR)

    degrees, minutes = converters.ANGLE_CONVERTER.to_degrees_and_minutes(np.pi / 3, AngleUnit.RADIANS)
    assert degrees == 59 or degrees == 60
    assert degrees + minutes / 60 == pytest.approx(60.0)


def test_split_keeps_minutes_positive_for_negative_angles():
    degrees, minutes = converters.ANGLE_CONVERTER.to_degrees_and_minutes(-0.5, AngleUnit.DEGREES)
    assert degrees == -1
    assert minutes == pytest.approx(30.0)


def test_decimal_split_is_exact():
    degrees, minutes, seconds = Angle(Decimal("30.5125"), AngleUnit.DEGREES).to_degrees_minutes_and_seconds()
    assert (degrees, minutes, seconds) == (Decimal("30"), Decimal("30"), Decimal("45"))
    assert isinstance(seconds, Decimal)


def test_compose_from_degrees_minutes_and_seconds():
    angle = Angle.from_degrees_minutes_and_seconds(30, 30, 45)
    assert angle.unit is AngleUnit.DEGREES
    assert angle.value == pytest.approx(30.5125)

    radians = Angle.from_degrees_and_minutes(45, 0, AngleUnit.RADIANS)
    assert radians.unit is AngleUnit.RADIANS
    assert radians.value == pytest.approx(np.pi / 4)

    value = converters.ANGLE_CONVERTER.from_degrees_and_minutes(Decimal("10"), Decimal("15"), AngleUnit.DEGREES)
    assert value == Decimal("10.25")


def test_compose_from_mixed_decimal_and_float_parts():
    angle = Angle.from_degrees_minutes_and_seconds(Decimal("30"), 30, 45.5)
    assert isinstance(angle.value, Decimal)
    assert angle.value == pytest.approx(Decimal("30") + (Decimal("30") + Decimal("45.5") / 60) / 60)

    value = converters.ANGLE_CONVERTER.from_degrees_and_minutes(10, Decimal("15"), AngleUnit.DEGREES)
    assert value == Decimal("10.25")
    radians = converters.ANGLE_CONVERTER.from_degrees_and_minutes(Decimal("180"), 0.0, AngleUnit.RADIANS)
    assert isinstance(radians, Decimal)
    assert float(radians) == pytest.approx(np.pi)
