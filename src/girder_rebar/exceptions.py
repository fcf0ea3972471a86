"""
Exceptions raised outside the calculation engine.

The engine itself never raises for engineering outcomes: rejected candidates
and infeasible designs are returned as values.
"""

from typing import Optional


class GirderRebarError(Exception):
    """Base class for package errors."""


class InputValidationError(GirderRebarError):
    """Geometry or load input failed validation before reaching the engine."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class SettingsError(GirderRebarError):
    """Design settings file could not be read or contains invalid values."""
