"""
geometry.py
-----------

Section path geometry for funnel charts.

The engine walks a cursor ``(left_x, right_x, height)`` down the chart, one
data row at a time, and emits a closed outline per row. Each step narrows the
outline by ``dx`` on both sides and descends by ``dy`` (see
``config.compute_steps``). When ``bottom_pinch`` is set, the last sections
stop narrowing and keep vertical sides.

Two outline flavors are produced:

    straight (5 points):  M top-left, L top-right, L bottom-right,
                          L bottom-left, L top-left
    curved   (8 points):  M top-left, Q control, "" top-right,
                          L bottom-right,
                          M bottom-right, Q control, "" bottom-left,
                          L top-left

Points carry the SVG command letter of the segment they end, which is what
``path_utils`` translates into SVG path data or Matplotlib path codes.

Core API:

    compute_sections(config, row_count) -> list[SectionPath]
    top_cap_path(config, first_section) -> SectionPath
    label_anchor(config, steps, index, section) -> LabelAnchor
"""

from __future__ import annotations

__all__ = [
    "SegmentKind", "PathPoint", "SectionPath", "LabelAnchor",
    "compute_sections", "top_cap_path", "label_anchor", "label_anchors",
    "CURVE_TOP_OFFSET",
]

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence

import numpy as np
from numpy.typing import NDArray

from .config import LOGGER_NAME, ChartConfig, SectionSteps, compute_steps
from .errors import ConfigurationError

# Depth of the top oval: curved charts start this many pixels down.
CURVE_TOP_OFFSET = 10


class SegmentKind(str, Enum):
    MOVE_TO = "M"
    LINE_TO = "L"
    CURVE_TO = "Q"      # quadratic curve control point
    CONTINUATION = ""   # end point of the preceding curve


class PathPoint(NamedTuple):
    x: float
    y: float
    kind: SegmentKind


class LabelAnchor(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class SectionPath:
    """Closed outline of one funnel section (or of the top cap)."""
    points: tuple[PathPoint, ...]

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        yield from self.points

    def __getitem__(self, index):
        return self.points[index]

    @property
    def vertices(self) -> NDArray[np.float64]:
        """(N, 2) array of point coordinates."""
        return np.array([(p.x, p.y) for p in self.points], dtype=float).reshape(-1, 2)

    @property
    def kinds(self) -> tuple[SegmentKind, ...]:
        return tuple(p.kind for p in self.points)

    @property
    def is_curved(self) -> bool:
        return SegmentKind.CURVE_TO in self.kinds

    # ---------------------------------------------------------------------------
    # Corner accessors (valid for both straight and curved sections)
    # ---------------------------------------------------------------------------
    @property
    def top_left(self) -> tuple[float, float]:
        return self.points[0][:2]

    @property
    def top_right(self) -> tuple[float, float]:
        return self.points[2 if self.is_curved else 1][:2]

    @property
    def bottom_right(self) -> tuple[float, float]:
        return self.points[3 if self.is_curved else 2][:2]

    @property
    def bottom_left(self) -> tuple[float, float]:
        return self.points[6 if self.is_curved else 3][:2]

    @property
    def top_width(self) -> float:
        return self.top_right[0] - self.top_left[0]

    @property
    def bottom_width(self) -> float:
        return self.bottom_right[0] - self.bottom_left[0]


# ---------------------------------------------------------------------------
# Section generation
# ---------------------------------------------------------------------------
def compute_sections(config: ChartConfig, row_count: int) -> list[SectionPath]:
    """Build the closed outline of every section, top to bottom.

    Args:
        config:    Chart options.
        row_count: Number of data rows (one section per row).

    Returns:
        list[SectionPath]: ``row_count`` outlines; section ``i + 1`` starts
        exactly where section ``i`` ends.

    Raises:
        EmptyDatasetError:  If ``row_count`` < 1.
        ConfigurationError: If ``bottom_pinch`` >= ``row_count``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    dx, dy = compute_steps(config, row_count)
    logger.debug(f"compute_sections(): rows={row_count}; dx={dx}; dy={dy}; "
                 f"curved={config.is_curved}; pinch={config.bottom_pinch}.")

    middle = config.width / 2
    pinch_start = row_count - config.bottom_pinch if config.bottom_pinch > 0 else row_count

    prev_left_x, prev_right_x = 0, config.width
    prev_height = CURVE_TOP_OFFSET if config.is_curved else 0

    sections = []
    for i in range(row_count):
        step = 0 if i >= pinch_start else dx

        next_left_x = prev_left_x + step
        next_right_x = prev_right_x - step
        next_height = prev_height + dy

        if config.is_curved:
            points = (
                # Top curve
                PathPoint(prev_left_x, prev_height, SegmentKind.MOVE_TO),
                PathPoint(middle, prev_height + (config.curve_height - CURVE_TOP_OFFSET),
                          SegmentKind.CURVE_TO),
                PathPoint(prev_right_x, prev_height, SegmentKind.CONTINUATION),
                # Right side
                PathPoint(next_right_x, next_height, SegmentKind.LINE_TO),
                # Bottom curve
                PathPoint(next_right_x, next_height, SegmentKind.MOVE_TO),
                PathPoint(middle, next_height + config.curve_height, SegmentKind.CURVE_TO),
                PathPoint(next_left_x, next_height, SegmentKind.CONTINUATION),
                # Left side
                PathPoint(prev_left_x, prev_height, SegmentKind.LINE_TO),
            )
        else:
            points = (
                PathPoint(prev_left_x, prev_height, SegmentKind.MOVE_TO),
                PathPoint(prev_right_x, prev_height, SegmentKind.LINE_TO),
                PathPoint(next_right_x, next_height, SegmentKind.LINE_TO),
                PathPoint(next_left_x, next_height, SegmentKind.LINE_TO),
                PathPoint(prev_left_x, prev_height, SegmentKind.LINE_TO),
            )
        sections.append(SectionPath(points))

        prev_left_x, prev_right_x, prev_height = next_left_x, next_right_x, next_height

    return sections


def top_cap_path(config: ChartConfig, first_section: SectionPath) -> SectionPath:
    """Build the oval lid drawn over the top of a curved funnel.

    The lower half reuses the top curve of ``first_section`` (its control point
    pushed down by another ``curve_height - CURVE_TOP_OFFSET``); the upper half
    arcs from ``(width, 10)`` through ``(width / 2, 0)`` back to ``(0, 10)``.

    Raises:
        ConfigurationError: If the chart is not curved.
        ValueError:         If ``first_section`` is not a curved section.
    """
    if not config.is_curved:
        raise ConfigurationError("The top cap exists only for curved charts.")
    if not first_section.is_curved or len(first_section) < 3:
        raise ValueError("first_section must be a curved section path.")

    start, control, end = first_section.points[:3]
    return SectionPath((
        PathPoint(start.x, start.y, SegmentKind.MOVE_TO),
        PathPoint(control.x, control.y + config.curve_height - CURVE_TOP_OFFSET,
                  SegmentKind.CURVE_TO),
        PathPoint(end.x, end.y, SegmentKind.CONTINUATION),
        PathPoint(config.width, CURVE_TOP_OFFSET, SegmentKind.MOVE_TO),
        PathPoint(config.width / 2, 0, SegmentKind.CURVE_TO),
        PathPoint(0, CURVE_TOP_OFFSET, SegmentKind.CONTINUATION),
    ))


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
def label_anchor(config: ChartConfig, steps: SectionSteps, index: int,
                 section: SectionPath) -> LabelAnchor:
    """Center point for the label of section ``index``.

    Straight sections use the middle of the row band; curved sections use the
    mean of the top-curve control height and the bottom-right corner height.
    """
    x = config.width / 2
    if not config.is_curved:
        return LabelAnchor(x, (steps.dy * (2 * index + 1)) / 2)
    return LabelAnchor(x, (section.points[1].y + section.points[3].y) / 2)


def label_anchors(config: ChartConfig, sections: Sequence[SectionPath]) -> list[LabelAnchor]:
    """Label anchors for a full list of sections."""
    steps = compute_steps(config, len(sections))
    return [label_anchor(config, steps, i, section) for i, section in enumerate(sections)]
