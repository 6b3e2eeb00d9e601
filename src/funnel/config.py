"""
config.py
---------

Chart configuration value object and the per-dataset step computation.

``ChartConfig`` is built once and never mutated. Defaults match the classic
funnel chart options (350x400 px, 200 px bottom, no pinch, straight sides).
Options may be supplied with either the camelCase keys used by the JavaScript
chart or their snake_case equivalents:

    config = ChartConfig.from_options({"bottomPinch": 1, "isCurved": True})
"""

from __future__ import annotations

__all__ = [
    "FillType", "ChartConfig", "DataRow", "SectionSteps", "compute_steps",
    "LOGGER_NAME",
]

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from enum import Enum
from numbers import Integral, Real
from typing import Any, NamedTuple, Optional, Union

from .errors import ConfigurationError, EmptyDatasetError

LOGGER_NAME = "funnel"

numeric = Union[int, float]


class FillType(str, Enum):
    SOLID = "solid"
    GRADIENT = "gradient"


# Original option names -> dataclass field names.
_OPTION_ALIASES = {
    "width"       : "width",
    "height"      : "height",
    "bottomWidth" : "bottom_width",
    "bottomPinch" : "bottom_pinch",
    "isCurved"    : "is_curved",
    "curveHeight" : "curve_height",
    "fillType"    : "fill_type",
    "isPyramid"   : "is_pyramid",
}


@dataclass(frozen=True)
class ChartConfig:
    """Immutable funnel chart options.

    Attributes:
        width:        Chart width in pixels (> 0).
        height:       Chart height in pixels (> 0).
        bottom_width: Width of the funnel's bottom edge. Values above ``width``
                      are accepted and produce an expanding shape.
        bottom_pinch: Number of trailing sections drawn with vertical sides.
        is_curved:    Curved section edges instead of straight ones.
        curve_height: Vertical pixels reserved for curvature (curved only).
        fill_type:    ``FillType.SOLID`` or ``FillType.GRADIENT``.
        is_pyramid:   Reserved orientation flag; stored but not applied.
    """
    width:        numeric  = 350
    height:       numeric  = 400
    bottom_width: numeric  = 200
    bottom_pinch: int      = 0
    is_curved:    bool     = False
    curve_height: numeric  = 20
    fill_type:    FillType = FillType.SOLID
    is_pyramid:   bool     = False

    def __post_init__(self):
        for name in ("width", "height", "curve_height"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}.")

        if not _is_number(self.bottom_width):
            raise ConfigurationError(
                f"bottom_width must be a finite number, got {self.bottom_width!r}."
            )

        if (not isinstance(self.bottom_pinch, Integral) or isinstance(self.bottom_pinch, bool)
                or self.bottom_pinch < 0):
            raise ConfigurationError(
                f"bottom_pinch must be a non-negative integer, got {self.bottom_pinch!r}."
            )

        for name in ("is_curved", "is_pyramid"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(
                    f"{name} must be a bool, got {type(getattr(self, name)).__name__}."
                )

        try:
            fill_type = FillType(self.fill_type)
        except ValueError:
            raise ConfigurationError(
                f"fill_type must be one of {[f.value for f in FillType]}, got {self.fill_type!r}."
            ) from None
        object.__setattr__(self, "fill_type", fill_type)

        # Curved charts reserve curve_height out of height for the section rows.
        if self.is_curved and self.curve_height >= self.height:
            raise ConfigurationError(
                f"curve_height ({self.curve_height}) must be smaller than height "
                f"({self.height}) for curved charts."
            )

        if self.bottom_width > self.width:
            logging.getLogger(LOGGER_NAME).debug(
                f"bottom_width={self.bottom_width} exceeds width={self.width}; "
                f"sections will widen toward the bottom."
            )

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None,
                     **overrides: Any) -> "ChartConfig":
        """Build a config from defaults plus user options.

        Keys may be camelCase (``bottomWidth``) or snake_case (``bottom_width``);
        ``overrides`` are applied after ``options``.

        Raises:
            ConfigurationError: On an unknown option name, an option given under
                                two aliases in the same mapping, or an invalid value.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for source in (options or {}, overrides):
            seen: dict[str, str] = {}
            for key, value in source.items():
                name = _OPTION_ALIASES.get(key, key)
                if name not in known:
                    raise ConfigurationError(f"Unknown chart option: {key!r}.")
                if name in seen:
                    raise ConfigurationError(
                        f"Options {seen[name]!r} and {key!r} both set {name!r}."
                    )
                seen[name] = key
                values[name] = value
        return cls(**values)

    def with_options(self, **changes: Any) -> "ChartConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)


class DataRow(NamedTuple):
    category: str
    count: numeric

    @classmethod
    def coerce(cls, row: Any) -> "DataRow":
        """Accept a DataRow or any ``(category, count)`` pair with a numeric count."""
        if not isinstance(row, DataRow):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence) or len(row) != 2:
                raise ConfigurationError(f"Expected a (category, count) pair, got {row!r}.")
            row = cls(str(row[0]), row[1])
        if not _is_number(row.count):
            raise ConfigurationError(
                f"Count for {row.category!r} must be a finite number, got {row.count!r}."
            )
        return row


class SectionSteps(NamedTuple):
    """Per-section horizontal (dx) and vertical (dy) steps."""
    dx: float
    dy: float


def compute_steps(config: ChartConfig, row_count: int) -> SectionSteps:
    """Compute the horizontal and vertical step for ``row_count`` sections.

    dx = (width - bottom_width) / 2 / (n - bottom_pinch)   if pinched
         (width - bottom_width) / 2 / n                    otherwise
    dy = (height - curve_height) / n                       if curved
         height / n                                        otherwise

    Raises:
        EmptyDatasetError:  If ``row_count`` < 1.
        ConfigurationError: If ``bottom_pinch`` >= ``row_count``.
    """
    if row_count < 1:
        raise EmptyDatasetError("A funnel needs at least one data row.")

    pinch = config.bottom_pinch
    if pinch > 0 and pinch >= row_count:
        raise ConfigurationError(
            f"bottom_pinch ({pinch}) must be smaller than the number of rows ({row_count})."
        )

    bottom_center = (config.width - config.bottom_width) / 2
    dx = bottom_center / (row_count - pinch) if pinch > 0 else bottom_center / row_count
    dy = ((config.height - config.curve_height) / row_count if config.is_curved
          else config.height / row_count)
    return SectionSteps(dx, dy)


def _is_number(value: Any) -> bool:
    """Finite real number, bools excluded."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
