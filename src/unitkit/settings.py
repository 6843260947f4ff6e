"""Process-wide conversion settings."""

from __future__ import annotations

import decimal
import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, Mapping

from .errors import InvalidArgumentError


logger = logging.getLogger(__name__)

PRECISION_ENV_VAR = "UNITKIT_DECIMAL_PRECISION"
TOLERANCE_ENV_VAR = "UNITKIT_DEFAULT_TOLERANCE"


@dataclass(frozen=True)
class ConversionSettings:
    """Tunable parameters shared by every converter and measurement."""

    decimal_precision: int = 34  # significant digits, same as IEEE decimal128
    default_tolerance: float = 0.0

    def __post_init__(self) -> None:
        if self.decimal_precision <= 0:
            raise InvalidArgumentError("decimal_precision must be a positive integer.")
        if self.default_tolerance < 0:
            raise InvalidArgumentError("default_tolerance cannot be negative.")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ConversionSettings":
        """Build settings from ``UNITKIT_*`` environment variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        precision = env.get(PRECISION_ENV_VAR)
        if precision:
            try:
                kwargs["decimal_precision"] = int(precision)
            except ValueError as exc:
                raise InvalidArgumentError(f"{PRECISION_ENV_VAR} must be an integer, got {precision!r}.") from exc
        tolerance = env.get(TOLERANCE_ENV_VAR)
        if tolerance:
            try:
                kwargs["default_tolerance"] = float(tolerance)
            except ValueError as exc:
                raise InvalidArgumentError(f"{TOLERANCE_ENV_VAR} must be a number, got {tolerance!r}.") from exc
        return cls(**kwargs)


_active = ConversionSettings.from_env()


def get_settings() -> ConversionSettings:
    return _active


def configure(settings: ConversionSettings | None = None, **changes: Any) -> ConversionSettings:
    """Replace the active settings and return the new value.

    Either pass a complete :class:`ConversionSettings` or keyword overrides for
    individual fields of the current one.
    """

    global _active
    updated = settings if settings is not None else _active
    if changes:
        updated = replace(updated, **changes)
    logger.debug("Conversion settings changed: %s -> %s", _active, updated)
    _active = updated
    return updated


@contextmanager
def decimal_context() -> Iterator[decimal.Context]:
    """Local decimal context carrying the configured precision."""

    with decimal.localcontext() as ctx:
        ctx.prec = _active.decimal_precision
        yield ctx


__all__ = [
    "ConversionSettings",
    "PRECISION_ENV_VAR",
    "TOLERANCE_ENV_VAR",
    "configure",
    "decimal_context",
    "get_settings",
]
