from .errors import (
    FunnelError, ConfigurationError, EmptyDatasetError, MalformedColorError,
)
from .config import ChartConfig, DataRow, FillType, SectionSteps, compute_steps
from .geometry import (
    SegmentKind, PathPoint, SectionPath, LabelAnchor,
    compute_sections, top_cap_path, label_anchor, label_anchors,
)
from .color import (
    shade, gradient_stops, gradient_spec, GradientStop, GradientSpec,
    SolidFill, GradientFill, section_fills, top_cap_fill, DEFAULT_PALETTE,
)
from .path_utils import to_svg_path, to_mpl_path, join_paths
from .chart import FunnelChart, FunnelLayout, SectionLabel
from .logging_utils import configure_logging

__version__ = "0.1.0"

__all__ = [
    "FunnelError", "ConfigurationError", "EmptyDatasetError", "MalformedColorError",
    "ChartConfig", "DataRow", "FillType", "SectionSteps", "compute_steps",
    "SegmentKind", "PathPoint", "SectionPath", "LabelAnchor",
    "compute_sections", "top_cap_path", "label_anchor", "label_anchors",
    "shade", "gradient_stops", "gradient_spec", "GradientStop", "GradientSpec",
    "SolidFill", "GradientFill", "section_fills", "top_cap_fill", "DEFAULT_PALETTE",
    "to_svg_path", "to_mpl_path", "join_paths",
    "FunnelChart", "FunnelLayout", "SectionLabel",
    "configure_logging",
]
