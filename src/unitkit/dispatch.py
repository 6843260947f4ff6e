"""Quantity-agnostic conversion entry point."""

from __future__ import annotations

import logging
from typing import Any

from .converters import converter_for
from .errors import InvalidArgumentError
from .unit_system import QuantityUnit


logger = logging.getLogger(__name__)


def convert(value: Any, unit: QuantityUnit, target_unit: QuantityUnit) -> Any:
    """Convert *value* from *unit* to *target_unit*.

    The converter is chosen from the type of *unit*; both units must belong to
    the same quantity.  Same-unit conversions return *value* untouched.
    """

    converter = converter_for(unit)
    unit = converter.unit_type.validate(unit)
    if target_unit is None or type(target_unit) is not converter.unit_type:
        raise InvalidArgumentError(
            f"Cannot convert {converter.unit_type.__name__} into {target_unit!r}."
        )
    logger.debug("Converting %r from %s to %s", value, unit.name, target_unit.name)
    return converter.convert(value, unit, target_unit)


__all__ = ["convert"]
