"""
color.py
--------

Shade derivation and fill descriptors for funnel sections.

``shade`` blends a ``#RRGGBB`` color toward black (negative amount) or white
(positive amount):

    channel' = round((target - channel) * |amount|) + channel

with ``target`` = 0 or 255 and half-up rounding. Gradient fills use a fixed
four-stop profile, darker at both edges:

    0% shade(-0.25) | 40% base | 60% base | 100% shade(-0.25)
"""

from __future__ import annotations

__all__ = [
    "shade", "parse_hex", "to_hex", "gradient_stops", "gradient_spec",
    "GradientStop", "GradientSpec", "SolidFill", "GradientFill", "Fill",
    "section_fills", "top_cap_fill", "palette_color",
    "DEFAULT_PALETTE", "GRADIENT_SHADE", "TOP_CAP_SHADE",
]

import re
from collections.abc import Sequence
from typing import NamedTuple, Optional, Union

import numpy as np
from matplotlib import colors as mcolors

from .config import ChartConfig, FillType
from .errors import MalformedColorError

GRADIENT_SHADE = -0.25
TOP_CAP_SHADE = -0.4

# Tableau 10 is the same ten-color categorical scale as d3's category10.
DEFAULT_PALETTE: tuple[str, ...] = tuple(
    mcolors.to_hex(c) for c in mcolors.TABLEAU_COLORS.values()
)

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


# ---------------------------------------------------------------------------
# Hex helpers
# ---------------------------------------------------------------------------
def parse_hex(color: str) -> np.ndarray:
    """Parse ``#RRGGBB`` into an int array ``[R, G, B]``."""
    if not isinstance(color, str) or not _HEX_RE.match(color):
        raise MalformedColorError(color)
    value = int(color[1:], 16)
    return np.array([(value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF], dtype=np.int64)


def to_hex(rgb: Sequence[int]) -> str:
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def shade(color: str, amount: float) -> str:
    """Darken (amount < 0) or lighten (amount > 0) a hex color.

    Args:
        color:  ``#RRGGBB`` hex string (case-insensitive).
        amount: Blend fraction toward black or white. Clamped to [-1, 1].

    Returns:
        str: Lowercase ``#rrggbb`` hex string.

    Raises:
        MalformedColorError: If ``color`` is not a 6-digit hex color.
    """
    rgb = parse_hex(color)
    amount = max(-1.0, min(float(amount), 1.0))
    target = 0 if amount < 0 else 255
    p = abs(amount)

    # Half-up rounding; np.round would round half to even.
    delta = np.floor((target - rgb) * p + 0.5).astype(np.int64)
    return to_hex(np.clip(rgb + delta, 0, 255))


# ---------------------------------------------------------------------------
# Gradients
# ---------------------------------------------------------------------------
class GradientStop(NamedTuple):
    offset: int     # percent, 0..100
    color: str


class GradientSpec(NamedTuple):
    id: str
    stops: tuple[GradientStop, ...]


def gradient_stops(base_color: str) -> tuple[GradientStop, ...]:
    dark = shade(base_color, GRADIENT_SHADE)
    base = to_hex(parse_hex(base_color))
    return (
        GradientStop(0, dark),
        GradientStop(40, base),
        GradientStop(60, base),
        GradientStop(100, dark),
    )


def gradient_spec(index: int, base_color: str) -> GradientSpec:
    """Gradient definition for section ``index``, keyed ``gradient-{index}``."""
    return GradientSpec(f"gradient-{index}", gradient_stops(base_color))


# ---------------------------------------------------------------------------
# Fill descriptors
# ---------------------------------------------------------------------------
class SolidFill(NamedTuple):
    color: str

    @property
    def paint(self) -> str:
        return self.color


class GradientFill(NamedTuple):
    gradient: GradientSpec

    @property
    def paint(self) -> str:
        """SVG paint reference to the registered gradient."""
        return f"url(#{self.gradient.id})"


Fill = Union[SolidFill, GradientFill]


def palette_color(index: int, palette: Optional[Sequence[str]] = None) -> str:
    """Color for section ``index``, cycling through ``palette``."""
    palette = palette or DEFAULT_PALETTE
    return palette[index % len(palette)]


def section_fills(config: ChartConfig, count: int,
                  palette: Optional[Sequence[str]] = None) -> list[Fill]:
    """One fill descriptor per section, following ``config.fill_type``.

    Raises:
        MalformedColorError: If a palette entry is not a ``#RRGGBB`` color.
    """
    palette = _checked_palette(palette)
    fills: list[Fill] = []
    for i in range(count):
        color = palette_color(i, palette)
        if config.fill_type is FillType.GRADIENT:
            fills.append(GradientFill(gradient_spec(i, color)))
        else:
            fills.append(SolidFill(color))
    return fills


def top_cap_fill(palette: Optional[Sequence[str]] = None) -> SolidFill:
    """Darkened first palette color used for the curved funnel's lid."""
    palette = _checked_palette(palette)
    return SolidFill(shade(palette_color(0, palette), TOP_CAP_SHADE))


def _checked_palette(palette: Optional[Sequence[str]]) -> tuple[str, ...]:
    if palette is None:
        return DEFAULT_PALETTE
    if isinstance(palette, str):
        raise TypeError("palette must be a sequence of hex colors, not a single string.")
    palette = tuple(palette)
    if not palette:
        raise ValueError("palette must contain at least one color.")
    for color in palette:
        parse_hex(color)
    return palette
