"""Dictionary and byte encodings of measurements."""

from __future__ import annotations

import json
import logging
import numbers
from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from .errors import InvalidArgumentError
from .measurement import QUANTITY_TYPES, Measurement


logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def to_dict(measurement: Measurement) -> Dict[str, Any]:
    """Return a JSON-compatible dictionary describing *measurement*.

    Decimal values are stored as strings and integers as JSON integers, so no
    digits are lost.
    """

    if not isinstance(measurement, Measurement):
        raise InvalidArgumentError(f"Expected a measurement, got {type(measurement)!r}.")
    if not measurement.is_set():
        raise InvalidArgumentError("Cannot serialize a measurement without value and unit.")
    value = measurement.value
    is_decimal = isinstance(value, Decimal)
    return {
        "quantity": type(measurement).__name__,
        "value": _encode_value(value),
        "unit": measurement.unit.name,
        "decimal": is_decimal,
    }


def _encode_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)


def _decode_value(raw_value: Any, is_decimal: bool) -> Any:
    if is_decimal:
        return Decimal(raw_value)
    if isinstance(raw_value, int) and not isinstance(raw_value, bool):
        return raw_value
    return float(raw_value)


def from_dict(payload: Dict[str, Any]) -> Measurement:
    """Construct a measurement from a dictionary (inverse of :func:`to_dict`)."""

    try:
        quantity = QUANTITY_TYPES[payload["quantity"]]
        unit = quantity.unit_type[payload["unit"]]
        value = _decode_value(payload["value"], payload.get("decimal", False))
    except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
        raise InvalidArgumentError(f"Malformed measurement payload: {payload!r}") from exc
    return quantity(value, unit)


def serialize(measurement: Measurement) -> bytes:
    data = json.dumps(to_dict(measurement), sort_keys=True).encode(ENCODING)
    logger.debug("Serialized %r into %d bytes", measurement, len(data))
    return data


def deserialize(data: bytes) -> Measurement:
    try:
        payload = json.loads(data.decode(ENCODING))
    except (UnicodeDecodeError, json.JSONDecodeError, AttributeError) as exc:
        raise InvalidArgumentError("Serialized measurement is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise InvalidArgumentError("Serialized measurement must decode to an object.")
    return from_dict(payload)


__all__ = ["deserialize", "from_dict", "serialize", "to_dict"]
