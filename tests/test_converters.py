from decimal import Decimal

import numpy as np
import pytest

from unitkit import (
    AccelerationUnit,
    AngularAccelerationUnit,
    AngularSpeedUnit,
    Distance,
    DistanceUnit,
    FrequencyUnit,
    InvalidArgumentError,
    MagneticFluxDensityUnit,
    SpeedUnit,
    SurfaceUnit,
    TimeUnit,
    VolumeUnit,
    Weight,
    WeightUnit,
    constants,
    converters,
)

ERROR = 1e-6

LINEAR_CONVERTERS = (
    converters.TIME_CONVERTER,
    converters.WEIGHT_CONVERTER,
    converters.DISTANCE_CONVERTER,
    converters.SPEED_CONVERTER,
    converters.ACCELERATION_CONVERTER,
    converters.ANGULAR_SPEED_CONVERTER,
    converters.ANGULAR_ACCELERATION_CONVERTER,
    converters.SURFACE_CONVERTER,
    converters.VOLUME_CONVERTER,
    converters.ANGLE_CONVERTER,
    converters.FREQUENCY_CONVERTER,
    converters.MAGNETIC_FLUX_DENSITY_CONVERTER,
)


def test_identity_conversion_returns_input_unchanged():
    value = 0.1234567891
    for converter in LINEAR_CONVERTERS + (converters.TEMPERATURE_CONVERTER,):
        for unit in converter.unit_type:
            assert converter.convert(value, unit, unit) is value
            exact = Decimal("1.000000000000000000001")
            assert converter.convert(exact, unit, unit) is exact


def test_round_trip_for_every_pair_of_units():
    value = 3.75
    for converter in LINEAR_CONVERTERS:
        for source in converter.unit_type:
            for target in converter.unit_type:
                there = converter.convert(value, source, target)
                back = converter.convert(there, target, source)
                assert back == pytest.approx(value, rel=ERROR)


def test_known_distance_and_weight_factors():
    convert = converters.DISTANCE_CONVERTER.convert
    assert convert(1.0, DistanceUnit.FOOT, DistanceUnit.METER) == pytest.approx(0.3048)
    assert convert(1.0, DistanceUnit.MILE, DistanceUnit.METER) == pytest.approx(1609.344)
    assert convert(1.0, DistanceUnit.YARD, DistanceUnit.INCH) == pytest.approx(36.0)
    assert convert(2500.0, DistanceUnit.MILLIMETER, DistanceUnit.METER) == pytest.approx(2.5)
    assert convert(1.0, DistanceUnit.KILOMETER, DistanceUnit.CENTIMETER) == pytest.approx(1e5)

    weight = converters.WEIGHT_CONVERTER.convert
    assert weight(1.0, WeightUnit.POUND, WeightUnit.GRAM) == pytest.approx(453.59, abs=ERROR)
    assert weight(1.0, WeightUnit.OUNCE, WeightUnit.GRAM) == pytest.approx(28.35, abs=ERROR)
    assert weight(1.0, WeightUnit.US_TON, WeightUnit.KILOGRAM) == pytest.approx(907.0, abs=ERROR)
    assert weight(1.0, WeightUnit.UK_TON, WeightUnit.KILOGRAM) == pytest.approx(1016.0, abs=ERROR)
    assert weight(1.0, WeightUnit.POUND, WeightUnit.OUNCE) == pytest.approx(453.59 / 28.35, abs=ERROR)
    assert weight(1.0, WeightUnit.MEGATONNE, WeightUnit.TONNE) == pytest.approx(1e6)
    assert weight(1.0, WeightUnit.GRAM, WeightUnit.PICOGRAM) == pytest.approx(1e12)


def test_known_time_speed_surface_and_volume_factors():
    assert converters.TIME_CONVERTER.convert(1.0, TimeUnit.DAY, TimeUnit.HOUR) == pytest.approx(24.0)
    assert converters.TIME_CONVERTER.convert(1.0, TimeUnit.CENTURY, TimeUnit.YEAR) == pytest.approx(100.0)
    assert converters.TIME_CONVERTER.convert(1.0, TimeUnit.MONTH, TimeUnit.DAY) == pytest.approx(30.0)
    assert converters.TIME_CONVERTER.convert(1.0, TimeUnit.SECOND, TimeUnit.NANOSECOND) == pytest.approx(1e9)

    speed = converters.SPEED_CONVERTER.convert
    assert speed(36.0, SpeedUnit.KILOMETERS_PER_HOUR, SpeedUnit.METERS_PER_SECOND) == pytest.approx(10.0)
    assert speed(1.0, SpeedUnit.MILES_PER_HOUR, SpeedUnit.METERS_PER_SECOND) == pytest.approx(0.44704)
    assert speed(1.0, SpeedUnit.KILOMETERS_PER_SECOND, SpeedUnit.KILOMETERS_PER_HOUR) == pytest.approx(3600.0)

    surface = converters.SURFACE_CONVERTER.convert
    assert surface(1.0, SurfaceUnit.ACRE, SurfaceUnit.SQUARE_METER) == pytest.approx(4046.8564224)
    assert surface(1.0, SurfaceUnit.HECTARE, SurfaceUnit.ARE) == pytest.approx(100.0)
    assert surface(1.0, SurfaceUnit.SQUARE_FOOT, SurfaceUnit.SQUARE_INCH) == pytest.approx(144.0)
    assert surface(1.0, SurfaceUnit.SQUARE_METER, SurfaceUnit.CENTIARE) == pytest.approx(1.0)

    volume = converters.VOLUME_CONVERTER.convert
    assert volume(1.0, VolumeUnit.GALLON, VolumeUnit.PINT) == pytest.approx(8.0)
    assert volume(1.0, VolumeUnit.BARREL, VolumeUnit.GALLON) == pytest.approx(42.0)
    assert volume(1.0, VolumeUnit.LITER, VolumeUnit.MILLILITER) == pytest.approx(1000.0)
    assert volume(1.0, VolumeUnit.CUBIC_DECIMETER, VolumeUnit.LITER) == pytest.approx(1.0)
    assert volume(1.0, VolumeUnit.CUBIC_FOOT, VolumeUnit.CUBIC_INCH) == pytest.approx(1728.0)


def test_acceleration_chains_through_meters_per_squared_second():
    value = 12.5
    direct = converters.ACCELERATION_CONVERTER.convert(
        value, AccelerationUnit.FEET_PER_SQUARED_SECOND, AccelerationUnit.G
    )
    meters = converters.feet_per_squared_second_to_meters_per_squared_second(value)
    chained = converters.meters_per_squared_second_to_gravity(meters)
    assert direct == pytest.approx(chained, abs=ERROR)
    assert meters == pytest.approx(value * 0.3048)

    assert converters.gravity_to_meters_per_squared_second(1.0) == pytest.approx(9.80665)
    assert converters.STANDARD_GRAVITY == 9.80665
    feet = converters.meters_per_squared_second_to_feet_per_squared_second(
        converters.gravity_to_meters_per_squared_second(value)
    )
    assert converters.ACCELERATION_CONVERTER.convert(
        value, AccelerationUnit.G, AccelerationUnit.FEET_PER_SQUARED_SECOND
    ) == pytest.approx(feet, abs=ERROR)


def test_angular_conversions_use_degrees_and_radians():
    assert converters.ANGULAR_SPEED_CONVERTER.convert(
        180.0, AngularSpeedUnit.DEGREES_PER_SECOND, AngularSpeedUnit.RADIANS_PER_SECOND
    ) == pytest.approx(np.pi)
    assert converters.ANGULAR_ACCELERATION_CONVERTER.convert(
        np.pi / 2, AngularAccelerationUnit.RADIANS_PER_SQUARED_SECOND, AngularAccelerationUnit.DEGREES_PER_SQUARED_SECOND
    ) == pytest.approx(90.0)


def test_supplementary_quantities():
    assert converters.FREQUENCY_CONVERTER.convert(
        2.4, FrequencyUnit.GIGAHERTZ, FrequencyUnit.MEGAHERTZ
    ) == pytest.approx(2400.0)
    assert converters.MAGNETIC_FLUX_DENSITY_CONVERTER.convert(
        50.0, MagneticFluxDensityUnit.MICROTESLA, MagneticFluxDensityUnit.NANOTESLA
    ) == pytest.approx(50000.0)


def test_decimal_input_stays_decimal():
    result = converters.DISTANCE_CONVERTER.convert(Decimal("1"), DistanceUnit.MILE, DistanceUnit.METER)
    assert isinstance(result, Decimal)
    assert result == Decimal("1609.344")

    inches = converters.DISTANCE_CONVERTER.convert(Decimal("1"), DistanceUnit.FOOT, DistanceUnit.INCH)
    assert inches == Decimal("12")

    grams = converters.WEIGHT_CONVERTER.convert(Decimal("2.5"), WeightUnit.KILOGRAM, WeightUnit.GRAM)
    assert isinstance(grams, Decimal)
    assert grams == Decimal("2500")

    gravity = converters.ACCELERATION_CONVERTER.convert(
        Decimal("2"), AccelerationUnit.G, AccelerationUnit.METERS_PER_SQUARED_SECOND
    )
    assert gravity == Decimal("19.61330")


def test_float_path_accepts_numpy_arrays_and_sequences():
    meters = np.array([0.0, 0.3048, 3.048])
    feet = converters.DISTANCE_CONVERTER.convert(meters, DistanceUnit.METER, DistanceUnit.FOOT)
    np.testing.assert_allclose(feet, [0.0, 1.0, 10.0])

    seconds = converters.TIME_CONVERTER.convert([1, 2, 3], TimeUnit.MINUTE, TimeUnit.SECOND)
    assert isinstance(seconds, np.ndarray)
    np.testing.assert_allclose(seconds, [60.0, 120.0, 180.0])


def test_converter_rejects_missing_value_and_foreign_units():
    with pytest.raises(InvalidArgumentError):
        converters.DISTANCE_CONVERTER.convert(None, DistanceUnit.METER, DistanceUnit.FOOT)
    with pytest.raises(InvalidArgumentError):
        converters.DISTANCE_CONVERTER.convert(1.0, None, DistanceUnit.FOOT)
    with pytest.raises(InvalidArgumentError):
        converters.DISTANCE_CONVERTER.convert(1.0, DistanceUnit.METER, WeightUnit.GRAM)


def test_linear_converter_requires_a_factor_for_every_unit():
    with pytest.raises(InvalidArgumentError):
        converters.LinearConverter(DistanceUnit, {DistanceUnit.METER: 1})


def test_converter_for_finds_the_quantity_converter():
    assert converters.converter_for(SpeedUnit.FEET_PER_SECOND) is converters.SPEED_CONVERTER
    assert converters.converter_for(VolumeUnit) is converters.VOLUME_CONVERTER
    with pytest.raises(InvalidArgumentError):
        converters.converter_for(None)
    with pytest.raises(InvalidArgumentError):
        converters.converter_for("meter")


def test_legal_weight_definitions_can_back_a_converter():
    factors = dict(converters.WEIGHT_CONVERTER.decimal_factors)
    factors.update(
        {
            WeightUnit.POUND: constants.LEGAL_KILOGRAMS_PER_POUND,
            WeightUnit.OUNCE: constants.LEGAL_KILOGRAMS_PER_OUNCE,
            WeightUnit.US_TON: constants.LEGAL_KILOGRAMS_PER_US_TON,
            WeightUnit.UK_TON: constants.LEGAL_KILOGRAMS_PER_UK_TON,
        }
    )
    legal = converters.LinearConverter(WeightUnit, factors)
    assert legal.convert(1.0, WeightUnit.POUND, WeightUnit.GRAM) == pytest.approx(453.59237)
    assert legal.convert(1.0, WeightUnit.US_TON, WeightUnit.POUND) == pytest.approx(2000.0)
    assert legal.convert(1.0, WeightUnit.UK_TON, WeightUnit.POUND) == pytest.approx(2240.0)


def test_convert_into_leaves_a_foreign_result_untouched():
    result = Weight(5.0, WeightUnit.GRAM)
    with pytest.raises(InvalidArgumentError):
        converters.DISTANCE_CONVERTER.convert_into(Distance(1.0, DistanceUnit.FOOT), DistanceUnit.METER, result)
    assert result.value == 5.0
    assert result.unit is WeightUnit.GRAM

    with pytest.raises(InvalidArgumentError):
        converters.DISTANCE_CONVERTER.convert_to(Distance(1.0, DistanceUnit.FOOT), result)
    assert result == Weight(5.0, WeightUnit.GRAM)
