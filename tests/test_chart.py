"""
test_chart.py
-------------
Unit tests for chart.py (FunnelChart facade).
"""

import logging

import pytest
from matplotlib.path import Path as mplPath

from funnel.chart import FunnelChart, FunnelLayout, SectionLabel
from funnel.color import GradientFill, SolidFill, DEFAULT_PALETTE
from funnel.config import ChartConfig, DataRow
from funnel.errors import ConfigurationError, EmptyDatasetError
from funnel.geometry import compute_sections


# ---------------------------------------------------------------------------
# 1. Construction
# ---------------------------------------------------------------------------

def test_rows_are_coerced_and_ordered(rows):
    chart = FunnelChart(rows)
    assert chart.rows[0] == DataRow("Applicants", 2000)
    assert [r.category for r in chart.rows] == [r[0] for r in rows]
    assert len(chart) == 4


def test_steps_computed_at_construction(rows):
    chart = FunnelChart(rows, ChartConfig(width=400, bottom_width=200))
    assert chart.steps.dx == 25
    assert chart.steps.dy == 100


def test_chart_is_immutable(rows):
    chart = FunnelChart(rows)
    with pytest.raises(AttributeError):
        chart.config = ChartConfig()


def test_empty_rows_rejected():
    with pytest.raises(EmptyDatasetError):
        FunnelChart([])


def test_pinch_validated_against_rows(rows):
    with pytest.raises(ConfigurationError):
        FunnelChart(rows, ChartConfig(bottom_pinch=4))


def test_config_type_checked(rows):
    with pytest.raises(TypeError):
        FunnelChart(rows, {"width": 100})


def test_pyramid_flag_warns(rows, caplog):
    with caplog.at_level(logging.WARNING, logger="funnel"):
        chart = FunnelChart(rows, ChartConfig(is_pyramid=True))
    assert "is_pyramid" in caplog.text
    assert chart.sections() == FunnelChart(rows).sections()


# ---------------------------------------------------------------------------
# 2. Geometry and labels
# ---------------------------------------------------------------------------

def test_sections_match_engine(rows, curved_config):
    chart = FunnelChart(rows, curved_config)
    assert chart.sections() == compute_sections(curved_config, len(rows))


def test_top_cap_only_when_curved(rows, straight_config, curved_config):
    assert FunnelChart(rows, straight_config).top_cap() is None
    assert FunnelChart(rows, straight_config).top_cap_fill() is None
    cap = FunnelChart(rows, curved_config).top_cap()
    assert len(cap) == 6


def test_labels(rows, straight_config):
    labels = FunnelChart(rows, straight_config).labels()
    assert labels[0] == SectionLabel("Applicants: 2000", 150, 25)
    assert labels[3].text == "Hired: 120"
    assert labels[3].y == pytest.approx(175)


def test_labels_reject_mismatched_sections(rows):
    chart = FunnelChart(rows)
    with pytest.raises(ValueError, match="one per row"):
        chart.labels(chart.sections()[:1])
    with pytest.raises(ValueError):
        chart.labels([])


def test_top_cap_rejects_empty_sections(rows, curved_config):
    with pytest.raises(ValueError):
        FunnelChart(rows, curved_config).top_cap([])


def test_labels_accept_precomputed_sections(rows, curved_config):
    chart = FunnelChart(rows, curved_config)
    assert chart.labels(tuple(chart.sections())) == chart.labels()


# ---------------------------------------------------------------------------
# 3. Outline
# ---------------------------------------------------------------------------

def test_straight_outline_joins_sections(rows, straight_config):
    outline = FunnelChart(rows, straight_config).outline()
    assert isinstance(outline, mplPath)
    assert (outline.codes == mplPath.MOVETO).sum() == len(rows)
    extents = outline.get_extents()
    assert extents.x0 == pytest.approx(0)
    assert extents.x1 == pytest.approx(straight_config.width)
    assert extents.y1 == pytest.approx(straight_config.height)


def test_curved_outline_includes_top_cap(rows, curved_config):
    chart = FunnelChart(rows, curved_config)
    outline = chart.outline()
    assert (outline.codes == mplPath.MOVETO).sum() == len(rows) + 1
    # lid apex sits on the top edge of the chart
    assert outline.vertices[:, 1].min() == pytest.approx(0)
    assert outline.contains_point((curved_config.width / 2, 100))


def test_outline_rejects_mismatched_sections(rows):
    chart = FunnelChart(rows)
    with pytest.raises(ValueError):
        chart.outline(chart.sections()[1:])


# ---------------------------------------------------------------------------
# 4. Fills and layout
# ---------------------------------------------------------------------------

def test_solid_fills_follow_palette(rows):
    fills = FunnelChart(rows).fills()
    assert fills == [SolidFill(c) for c in DEFAULT_PALETTE[:4]]


def test_gradient_fills(rows):
    chart = FunnelChart(rows, ChartConfig.from_options({"fillType": "gradient"}))
    fills = chart.fills(["#336699", "#993366"])
    assert all(isinstance(f, GradientFill) for f in fills)
    assert fills[2].gradient.stops[1].color == "#336699"


def test_layout_bundles_everything(rows, curved_config):
    layout = FunnelChart(rows, curved_config).layout()
    assert isinstance(layout, FunnelLayout)
    assert len(layout.sections) == len(layout.fills) == len(layout.labels) == 4
    assert layout.top_cap is not None
    assert layout.top_cap_fill.color != DEFAULT_PALETTE[0]


def test_layout_is_recomputed_identically(rows, curved_config):
    chart = FunnelChart(rows, curved_config)
    assert chart.layout() == chart.layout()
