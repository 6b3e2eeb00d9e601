"""
path_utils.py
-------------

Converters from ``SectionPath`` point lists into drawing-surface formats.

Core API:

    to_svg_path(section: SectionPath) -> str

        SVG path data, one ``{command}{x},{y}`` token per point, e.g.
        ``"M0,0 L300,0 L275,66.6667 L25,66.6667 L0,0"``.


    to_mpl_path(section: SectionPath, close: bool = True) -> mplPath

        Matplotlib ``Path`` with MOVETO / LINETO / CURVE3 codes, ready to be
        wrapped in a ``PathPatch``.


    join_paths(paths: list[mplPath], preserve_moveto: bool = False) -> mplPath

        Joins multiple paths into a single composite path (e.g. the full
        funnel outline).

Curved sections restart the pen with a MOVETO at the bottom-right corner, the
point the right side already ended on. Both converters emit that repeated
MOVETO as a line segment so the section stays a single fillable region.
"""

from __future__ import annotations

__all__ = ["to_svg_path", "to_mpl_path", "join_paths", "path_codes"]

import numpy as np
from matplotlib.path import Path as mplPath

from .geometry import SectionPath, SegmentKind

_MPL_CODES = {
    SegmentKind.MOVE_TO      : mplPath.MOVETO,
    SegmentKind.LINE_TO      : mplPath.LINETO,
    SegmentKind.CURVE_TO     : mplPath.CURVE3,
    SegmentKind.CONTINUATION : mplPath.CURVE3,
}


def _check_section(section: SectionPath) -> None:
    if not isinstance(section, SectionPath):
        raise TypeError(f"Expected a SectionPath, got {type(section).__name__}.")
    if len(section) == 0:
        raise ValueError("Cannot convert an empty section path.")
    if section.points[0].kind is not SegmentKind.MOVE_TO:
        raise ValueError("A section path must start with a move-to point.")


def _drawing_kinds(section: SectionPath) -> list[SegmentKind]:
    """Segment kinds with pen-position-preserving interior moves turned into lines."""
    kinds = [section.points[0].kind]
    for prev, point in zip(section.points, section.points[1:]):
        if point.kind is SegmentKind.MOVE_TO and (point.x, point.y) == (prev.x, prev.y):
            kinds.append(SegmentKind.LINE_TO)
        else:
            kinds.append(point.kind)
    return kinds


def _fmt(value: float) -> str:
    return f"{float(value):.6g}"


def to_svg_path(section: SectionPath) -> str:
    """Render ``section`` as SVG path data.

    Raises:
        TypeError:  If ``section`` is not a ``SectionPath``.
        ValueError: If ``section`` is empty or does not start with a move-to.
    """
    _check_section(section)
    tokens = [
        f"{kind.value}{_fmt(p.x)},{_fmt(p.y)}"
        for p, kind in zip(section.points, _drawing_kinds(section))
    ]
    return " ".join(tokens)


def path_codes(section: SectionPath, close: bool = True) -> np.ndarray:
    """Matplotlib path codes for ``section`` (plus CLOSEPOLY if ``close``)."""
    _check_section(section)
    codes = [_MPL_CODES[kind] for kind in _drawing_kinds(section)]
    if close:
        codes.append(mplPath.CLOSEPOLY)
    return np.array(codes, dtype=mplPath.code_type)


def to_mpl_path(section: SectionPath, close: bool = True) -> mplPath:
    """Convert ``section`` into a Matplotlib ``Path``.

    Args:
        section: Section or top-cap outline.
        close:   Append a CLOSEPOLY vertex so patches render a closed edge.

    Returns:
        matplotlib.path.Path

    Raises:
        TypeError:  If ``section`` is not a ``SectionPath``.
        ValueError: If ``section`` is empty or does not start with a move-to.
    """
    codes = path_codes(section, close=close)
    vertices = section.vertices
    if close:
        # CLOSEPOLY vertex is ignored by Matplotlib; repeat the start point.
        vertices = np.vstack([vertices, vertices[:1]])
    return mplPath(vertices, codes)


# ---------------------------------------------------------------------------
# Path joining utility
# ---------------------------------------------------------------------------
def join_paths(
        paths           : list[mplPath],
        preserve_moveto : bool           = False,
    ) -> mplPath:
    """Join multiple Matplotlib ``Path`` objects into a single composite path.

    Args:
        paths (list[matplotlib.path.Path]):
            Input list of path objects to join.
        preserve_moveto (bool, optional):
            Whether to keep the initial ``MOVETO`` command for each path.
            If ``False`` (default), the leading ``MOVETO`` of every path after
            the first is dropped and the pen continues from the previous path.

    Returns:
        matplotlib.path.Path:
            The concatenated composite path.

    Raises:
        ValueError: If ``paths`` is empty.
        TypeError: If any element of ``paths`` is not a ``Path`` instance.
    """
    if not paths:
        raise ValueError("Expected a non-empty list of Matplotlib paths.")

    for path in paths:
        if not isinstance(path, mplPath):
            raise TypeError(f"Expected a list of Matplotlib paths, got {type(path).__name__}.")

    verts_list, codes_list = [paths[0].vertices], [paths[0].codes]

    start = 0 if preserve_moveto else 1
    for path in paths[1:]:
        if path.vertices.size == 0:
            continue
        verts_list.append(path.vertices[start:])
        codes_list.append(path.codes[start:])

    return mplPath(np.concatenate(verts_list), np.concatenate(codes_list))
