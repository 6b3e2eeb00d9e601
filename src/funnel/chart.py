"""
chart.py
--------

``FunnelChart`` bundles a dataset with its configuration and hands the
rendering layer everything it needs for one draw: section outlines, the
optional top cap, fills, and labels. Nothing is cached; every call recomputes
from the immutable inputs.

Example:

    chart = FunnelChart(
        [("Visits", 5000), ("Sign-ups", 2500), ("Purchases", 500)],
        ChartConfig.from_options({"isCurved": True, "fillType": "gradient"}),
    )
    layout = chart.layout()
    for section, fill, label in zip(layout.sections, layout.fills, layout.labels):
        ...
"""

from __future__ import annotations

__all__ = ["FunnelChart", "FunnelLayout", "SectionLabel"]

import logging
from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple, Optional

from matplotlib.path import Path as mplPath

from .color import Fill, SolidFill, section_fills, top_cap_fill
from .config import LOGGER_NAME, ChartConfig, DataRow, SectionSteps, compute_steps
from .geometry import SectionPath, compute_sections, label_anchor, top_cap_path
from .path_utils import join_paths, to_mpl_path


class SectionLabel(NamedTuple):
    text: str
    x: float
    y: float


class FunnelLayout(NamedTuple):
    sections: list[SectionPath]
    top_cap: Optional[SectionPath]
    top_cap_fill: Optional[SolidFill]
    fills: list[Fill]
    labels: list[SectionLabel]


class FunnelChart:
    """Immutable pairing of data rows and chart options.

    Args:
        rows:   Ordered ``(category, count)`` pairs, widest section first.
        config: Chart options; defaults to ``ChartConfig()``.

    Raises:
        EmptyDatasetError:  If ``rows`` is empty.
        ConfigurationError: If a row is malformed or ``bottom_pinch`` is not
                            smaller than the number of rows.
    """

    __slots__ = ("_rows", "_config", "_steps")

    def __init__(self, rows: Iterable[Any], config: Optional[ChartConfig] = None) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        config = config if config is not None else ChartConfig()
        if not isinstance(config, ChartConfig):
            raise TypeError(f"config must be a ChartConfig, not {type(config).__name__}")

        data = tuple(DataRow.coerce(row) for row in rows)
        steps = compute_steps(config, len(data))

        object.__setattr__(self, "_rows", data)
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_steps", steps)

        if config.is_pyramid:
            logger.warning("is_pyramid is not applied; the chart is drawn as a funnel.")
        logger.debug(f"FunnelChart: {len(data)} rows; steps={steps}; config={config}.")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------
    @property
    def rows(self) -> tuple[DataRow, ...]:
        return self._rows

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def steps(self) -> SectionSteps:
        return self._steps

    def __len__(self) -> int:
        return len(self._rows)

    # ---------------------------------------------------------------------------
    # Geometry
    # ---------------------------------------------------------------------------
    def sections(self) -> list[SectionPath]:
        return compute_sections(self._config, len(self._rows))

    def top_cap(self, sections: Optional[Sequence[SectionPath]] = None) -> Optional[SectionPath]:
        """Lid outline for curved charts, ``None`` otherwise."""
        if not self._config.is_curved:
            return None
        sections = self._given_sections(sections)
        return top_cap_path(self._config, sections[0])

    def labels(self, sections: Optional[Sequence[SectionPath]] = None) -> list[SectionLabel]:
        """``"{category}: {count}"`` labels centered on each section."""
        sections = self._given_sections(sections)
        labels = []
        for i, (row, section) in enumerate(zip(self._rows, sections)):
            x, y = label_anchor(self._config, self._steps, i, section)
            labels.append(SectionLabel(f"{row.category}: {row.count}", x, y))
        return labels

    def outline(self, sections: Optional[Sequence[SectionPath]] = None) -> mplPath:
        """Single Matplotlib path holding every section (and the lid, if curved).

        Each outline keeps its own MOVETO, so the result can be used for
        extents, hit-testing, or drawing the whole funnel edge in one patch.
        """
        sections = self._given_sections(sections)
        paths = [to_mpl_path(section) for section in sections]
        if self._config.is_curved:
            paths.insert(0, to_mpl_path(top_cap_path(self._config, sections[0])))
        return join_paths(paths, preserve_moveto=True)

    def _given_sections(self, sections: Optional[Sequence[SectionPath]]) -> list[SectionPath]:
        if sections is None:
            return self.sections()
        sections = list(sections)
        if len(sections) != len(self._rows):
            raise ValueError(
                f"Expected {len(self._rows)} sections, one per row, got {len(sections)}."
            )
        return sections

    # ---------------------------------------------------------------------------
    # Fills
    # ---------------------------------------------------------------------------
    def fills(self, palette: Optional[Sequence[str]] = None) -> list[Fill]:
        return section_fills(self._config, len(self._rows), palette)

    def top_cap_fill(self, palette: Optional[Sequence[str]] = None) -> Optional[SolidFill]:
        if not self._config.is_curved:
            return None
        return top_cap_fill(palette)

    def layout(self, palette: Optional[Sequence[str]] = None) -> FunnelLayout:
        """Everything a renderer needs for one draw invocation."""
        sections = self.sections()
        return FunnelLayout(
            sections=sections,
            top_cap=self.top_cap(sections),
            top_cap_fill=self.top_cap_fill(palette),
            fills=self.fills(palette),
            labels=self.labels(sections),
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} rows={len(self._rows)} config={self._config!r}>"
