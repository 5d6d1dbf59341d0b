"""Exceptions raised by the report pipeline."""

from __future__ import annotations


class ReportError(RuntimeError):
    """Base class for failures that abort report generation."""


class LoadError(ReportError):
    """Raised when the players source cannot be read or decoded."""


class ValidationError(ReportError, ValueError):
    """Raised when a player record or a pipeline parameter is invalid."""


class EmptyInputError(ReportError, ValueError):
    """Raised when an aggregate is requested over zero player stats."""


class PersistError(ReportError):
    """Raised when the report cannot be written."""


__all__ = [
    "ReportError",
    "LoadError",
    "ValidationError",
    "EmptyInputError",
    "PersistError",
]
