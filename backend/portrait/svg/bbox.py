"""Analytic bounding boxes for owned SVG nodes.

``local_bbox`` follows SVG ``getBBox()`` semantics: the geometry of the node
and its descendants, in the node's own user space. Descendant ``transform``
attributes are applied; the node's own ``transform`` is not. Stroke widths are
ignored, as in the browser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, parse_path
from svgpathtools.path import transform as transform_path

from portrait.svg.node import SvgNode
from portrait.utils.geometry import (
    Extent,
    apply_matrix,
    ellipse_points,
    extent,
    extent_corners,
    identity,
    is_axis_aligned,
    parse_transform,
    union_extents,
)
from portrait.utils.math_helpers import parse_leading_float

logger = logging.getLogger(__name__)

# Containers whose content is never painted directly.
_NON_RENDERED = {
    "defs", "clipPath", "mask", "symbol", "marker", "pattern",
    "linearGradient", "radialGradient", "title", "desc", "metadata", "style",
}

# Samples per arc path segment under rotation or skew.
_SEGMENT_SAMPLES = 64
_T = np.linspace(0.0, 1.0, _SEGMENT_SAMPLES)


@dataclass(frozen=True)
class BBox:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_extent(cls, ext: Extent | None) -> BBox:
        if ext is None:
            return cls()
        xmin, ymin, xmax, ymax = ext
        return cls(xmin, ymin, xmax - xmin, ymax - ymin)

    @property
    def cx(self) -> float:
        return self.x + self.width / 2

    @property
    def cy(self) -> float:
        return self.y + self.height / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def local_bbox(node: SvgNode) -> BBox:
    """Bounding box in the node's own user space (its transform excluded)."""
    return BBox.from_extent(_subtree_extent(node, identity()))


def screen_bbox(node: SvgNode) -> BBox:
    """Bounding box after the node's own transform, i.e. in its parent's space.

    For a direct child of the surface this is canvas space.
    """
    return BBox.from_extent(_subtree_extent(node, parse_transform(node.get("transform"))))


def _subtree_extent(node: SvgNode, matrix: NDArray[np.float64]) -> Extent | None:
    if node.tag in _NON_RENDERED:
        return None

    extents: list[Extent] = []
    own = _shape_extent(node, matrix)
    if own is not None:
        extents.append(own)

    for child in node.children:
        child_matrix = matrix @ parse_transform(child.get("transform"))
        ext = _subtree_extent(child, child_matrix)
        if ext is not None:
            extents.append(ext)

    return union_extents(extents)


def _num(node: SvgNode, name: str) -> float:
    value = node.get(name)
    if value is None:
        return 0.0
    parsed = parse_leading_float(value)
    return parsed if parsed is not None else 0.0


def _shape_extent(node: SvgNode, matrix: NDArray[np.float64]) -> Extent | None:
    """Extent of the node's own geometry under ``matrix``.

    Axis-aligned matrices map the exact local extent. Under rotation or skew,
    line and Bezier paths are transformed exactly; arcs and ellipses are
    sampled.
    """
    tag = node.tag
    exact: Extent | None = None
    points: NDArray[np.float64] | None = None

    if tag == "path":
        d = node.get("d", "")
        if not d or not d.strip():
            return None
        try:
            path = parse_path(d)
        except Exception as e:
            logger.warning("Failed to parse path: %s", e)
            return None
        if len(path) == 0:
            return None
        if is_axis_aligned(matrix):
            xmin, xmax, ymin, ymax = path.bbox()
            exact = (xmin, ymin, xmax, ymax)
        elif not any(isinstance(seg, Arc) for seg in path):
            # Lines and Beziers map exactly through their control points
            xmin, xmax, ymin, ymax = transform_path(path, matrix).bbox()
            return (xmin, ymin, xmax, ymax)
        else:
            sampled = [seg.point(t) for seg in path for t in _T]
            points = np.array([(p.real, p.imag) for p in sampled])

    elif tag == "rect":
        x, y = _num(node, "x"), _num(node, "y")
        exact = (x, y, x + _num(node, "width"), y + _num(node, "height"))

    elif tag in ("circle", "ellipse"):
        cx, cy = _num(node, "cx"), _num(node, "cy")
        if tag == "circle":
            rx = ry = _num(node, "r")
        else:
            rx, ry = _num(node, "rx"), _num(node, "ry")
        if is_axis_aligned(matrix):
            exact = (cx - rx, cy - ry, cx + rx, cy + ry)
        else:
            points = ellipse_points(cx, cy, rx, ry)

    elif tag == "line":
        points = np.array([
            [_num(node, "x1"), _num(node, "y1")],
            [_num(node, "x2"), _num(node, "y2")],
        ])

    elif tag in ("polyline", "polygon"):
        values = [parse_leading_float(v) for v in node.get("points", "").replace(",", " ").split()]
        coords = [v for v in values if v is not None]
        if len(coords) < 2:
            return None
        points = np.array(coords[: len(coords) // 2 * 2]).reshape(-1, 2)

    else:
        return None

    if exact is not None:
        points = extent_corners(exact)
    return extent(apply_matrix(matrix, points))
