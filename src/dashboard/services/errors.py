"""Structured errors raised by the table sorting services."""

from __future__ import annotations
from typing import Any


class SortingError(Exception):
    """Base class for sorting related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidSpecListError(SortingError):
    """Raised when a sort spec list contains duplicate keys or foreign entries."""


class UnknownComparatorError(SortingError, KeyError):
    """Raised when a comparator tag is not registered."""

    def __str__(self) -> str:  # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class RegistryFrozenError(SortingError):
    """Raised when registering a comparator on a frozen registry."""
