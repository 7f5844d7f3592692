"""Structured errors raised by the grid layout engine."""

from __future__ import annotations
from typing import Any


class LayoutError(Exception):
    """Base class for grid layout issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(LayoutError):
    """Raised when a GridConfiguration cannot produce a valid layout."""
