"""
errors.py
---------

Exception types raised by the funnel geometry and color routines.

All of them derive from ``ValueError`` so callers that already guard chart
construction with ``except ValueError`` keep working.
"""

from __future__ import annotations

__all__ = [
    "FunnelError", "ConfigurationError", "EmptyDatasetError",
    "MalformedColorError",
]


class FunnelError(ValueError):
    """Base class for all funnel errors."""


class ConfigurationError(FunnelError):
    """Chart options violate a precondition (e.g. pinch >= row count)."""


class EmptyDatasetError(FunnelError):
    """No data rows were supplied."""


class MalformedColorError(FunnelError):
    """Color string is not a ``#RRGGBB`` hex color."""

    def __init__(self, color: object) -> None:
        self.color = color
        super().__init__(f"Expected a '#RRGGBB' hex color, got {color!r}.")
