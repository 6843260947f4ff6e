"""Exceptions raised by unitkit."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a unit or value is missing or does not fit the quantity."""


__all__ = ["InvalidArgumentError"]
