"""Conversion factors between units and their SI base unit.

Every factor is the size of one unit expressed in the base unit of its
quantity, stored as an exact :class:`~decimal.Decimal`.  Defined constants are
taken from :mod:`scipy.constants`; composite ones (areas, volumes, speeds) are
built here in decimal arithmetic so no binary rounding leaks into them.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from scipy import constants as sc


def _defined(value: float) -> Decimal:
    """Return the decimal a scipy float stands for (defined values have <= 15 digits)."""

    with decimal.localcontext() as ctx:
        ctx.prec = 15
        return (+Decimal(value)).normalize()


# 50 digits
PI = Decimal("3.14159265358979323846264338327950288419716939937510")

with decimal.localcontext() as _ctx:
    _ctx.prec = 50

    # time (base: second)
    SECONDS_PER_NANOSECOND = _defined(sc.nano)
    SECONDS_PER_MICROSECOND = _defined(sc.micro)
    SECONDS_PER_MILLISECOND = _defined(sc.milli)
    SECONDS_PER_MINUTE = _defined(sc.minute)
    SECONDS_PER_HOUR = _defined(sc.hour)
    SECONDS_PER_DAY = _defined(sc.day)
    SECONDS_PER_WEEK = _defined(sc.week)
    SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
    SECONDS_PER_YEAR = _defined(sc.year)
    SECONDS_PER_CENTURY = 100 * SECONDS_PER_YEAR

    # weight (base: kilogram)
    KILOGRAMS_PER_PICOGRAM = _defined(sc.pico * sc.gram)
    KILOGRAMS_PER_NANOGRAM = _defined(sc.nano * sc.gram)
    KILOGRAMS_PER_MICROGRAM = _defined(sc.micro * sc.gram)
    KILOGRAMS_PER_MILLIGRAM = _defined(sc.milli * sc.gram)
    KILOGRAMS_PER_GRAM = _defined(sc.gram)
    KILOGRAMS_PER_TONNE = _defined(sc.metric_ton)
    KILOGRAMS_PER_MEGATONNE = _defined(sc.mega) * KILOGRAMS_PER_TONNE
    # customary imperial weights, rounded to the gram figures in everyday use
    KILOGRAMS_PER_US_TON = Decimal("0.907") * KILOGRAMS_PER_TONNE
    KILOGRAMS_PER_UK_TON = Decimal("1.016") * KILOGRAMS_PER_TONNE
    KILOGRAMS_PER_POUND = Decimal("453.59") * KILOGRAMS_PER_GRAM
    KILOGRAMS_PER_OUNCE = Decimal("28.35") * KILOGRAMS_PER_GRAM

    # exact legal definitions, for callers that build their own weight converter
    LEGAL_KILOGRAMS_PER_US_TON = _defined(sc.short_ton)
    LEGAL_KILOGRAMS_PER_UK_TON = _defined(sc.long_ton)
    LEGAL_KILOGRAMS_PER_POUND = _defined(sc.pound)
    LEGAL_KILOGRAMS_PER_OUNCE = _defined(sc.oz)

    # distance (base: meter)
    METERS_PER_MILLIMETER = _defined(sc.milli)
    METERS_PER_CENTIMETER = _defined(sc.centi)
    METERS_PER_KILOMETER = _defined(sc.kilo)
    METERS_PER_INCH = _defined(sc.inch)
    METERS_PER_FOOT = _defined(sc.foot)
    METERS_PER_YARD = _defined(sc.yard)
    METERS_PER_MILE = _defined(sc.mile)

    # speed (base: meter per second)
    METERS_PER_SECOND_PER_KILOMETER_PER_HOUR = METERS_PER_KILOMETER / SECONDS_PER_HOUR
    METERS_PER_SECOND_PER_KILOMETER_PER_SECOND = METERS_PER_KILOMETER
    METERS_PER_SECOND_PER_FOOT_PER_SECOND = METERS_PER_FOOT
    METERS_PER_SECOND_PER_MILE_PER_HOUR = METERS_PER_MILE / SECONDS_PER_HOUR

    # acceleration (base: meter per squared second)
    STANDARD_GRAVITY = _defined(sc.g)

    # angles (base: radian)
    RADIANS_PER_DEGREE = PI / 180

    # surface (base: square meter)
    SQUARE_METERS_PER_SQUARE_MILLIMETER = METERS_PER_MILLIMETER ** 2
    SQUARE_METERS_PER_SQUARE_CENTIMETER = METERS_PER_CENTIMETER ** 2
    SQUARE_METERS_PER_SQUARE_KILOMETER = METERS_PER_KILOMETER ** 2
    SQUARE_METERS_PER_SQUARE_INCH = METERS_PER_INCH ** 2
    SQUARE_METERS_PER_SQUARE_FOOT = METERS_PER_FOOT ** 2
    SQUARE_METERS_PER_SQUARE_YARD = METERS_PER_YARD ** 2
    SQUARE_METERS_PER_SQUARE_MILE = METERS_PER_MILE ** 2
    SQUARE_METERS_PER_CENTIARE = Decimal(1)
    SQUARE_METERS_PER_ARE = Decimal(100)
    SQUARE_METERS_PER_DECARE = Decimal(1000)
    SQUARE_METERS_PER_HECTARE = _defined(sc.hectare)
    SQUARE_METERS_PER_ACRE = _defined(sc.acre)

    # volume (base: cubic meter)
    CUBIC_METERS_PER_CUBIC_CENTIMETER = METERS_PER_CENTIMETER ** 3
    CUBIC_METERS_PER_MILLILITER = _defined(sc.milli * sc.liter)
    CUBIC_METERS_PER_CUBIC_DECIMETER = _defined(sc.deci) ** 3
    CUBIC_METERS_PER_LITER = _defined(sc.liter)
    CUBIC_METERS_PER_HECTOLITER = _defined(sc.hecto * sc.liter)
    CUBIC_METERS_PER_CUBIC_INCH = METERS_PER_INCH ** 3
    CUBIC_METERS_PER_GALLON = _defined(sc.gallon)
    CUBIC_METERS_PER_PINT = CUBIC_METERS_PER_GALLON / 8
    CUBIC_METERS_PER_CUBIC_FOOT = METERS_PER_FOOT ** 3
    CUBIC_METERS_PER_BARREL = _defined(sc.barrel)

    # frequency (base: hertz)
    HERTZ_PER_KILOHERTZ = _defined(sc.kilo)
    HERTZ_PER_MEGAHERTZ = _defined(sc.mega)
    HERTZ_PER_GIGAHERTZ = _defined(sc.giga)
    HERTZ_PER_TERAHERTZ = _defined(sc.tera)

    # magnetic flux density (base: tesla)
    TESLAS_PER_NANOTESLA = _defined(sc.nano)
    TESLAS_PER_MICROTESLA = _defined(sc.micro)
    TESLAS_PER_MILLITESLA = _defined(sc.milli)
    TESLAS_PER_KILOTESLA = _defined(sc.kilo)
    TESLAS_PER_MEGATESLA = _defined(sc.mega)
    TESLAS_PER_GIGATESLA = _defined(sc.giga)

# temperature (Celsius of 0 K)
ABSOLUTE_ZERO_CELSIUS = Decimal("-273.15")
