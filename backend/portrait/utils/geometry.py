"""Leaf-node geometry helpers. No engine imports.

Affine transforms are 3×3 numpy matrices acting on column vectors (x, y, 1),
so an SVG transform list "A B C" composes to A @ B @ C.
"""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

_TRANSFORM_RE = re.compile(r"([a-zA-Z]+)\s*\(([^)]*)\)")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Extent = tuple[float, float, float, float]


def identity() -> NDArray[np.float64]:
    return np.eye(3)


def translation(tx: float, ty: float = 0.0) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def scaling(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    if sy is None:
        sy = sx
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotation(degrees: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    """Rotation about (cx, cy), SVG convention (positive = clockwise on screen)."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    if cx == 0 and cy == 0:
        return rot
    return translation(cx, cy) @ rot @ translation(-cx, -cy)


def skew_x(degrees: float) -> NDArray[np.float64]:
    return np.array([[1.0, math.tan(math.radians(degrees)), 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def skew_y(degrees: float) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, 0.0], [math.tan(math.radians(degrees)), 1.0, 0.0], [0.0, 0.0, 1.0]])


def parse_transform(text: str | None) -> NDArray[np.float64]:
    """Parse an SVG transform attribute into a single matrix.

    Unknown functions and malformed argument lists are ignored.
    """
    matrix = identity()
    if not text:
        return matrix

    for m in _TRANSFORM_RE.finditer(text):
        name = m.group(1)
        args = [float(a) for a in _NUMBER_RE.findall(m.group(2))]
        step: NDArray[np.float64] | None = None

        if name == "translate" and args:
            step = translation(args[0], args[1] if len(args) > 1 else 0.0)
        elif name == "scale" and args:
            step = scaling(args[0], args[1] if len(args) > 1 else None)
        elif name == "rotate" and args:
            if len(args) >= 3:
                step = rotation(args[0], args[1], args[2])
            else:
                step = rotation(args[0])
        elif name == "skewX" and args:
            step = skew_x(args[0])
        elif name == "skewY" and args:
            step = skew_y(args[0])
        elif name == "matrix" and len(args) == 6:
            a, b, c, d, e, f = args
            step = np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])

        if step is not None:
            matrix = matrix @ step

    return matrix


def is_axis_aligned(matrix: NDArray[np.float64]) -> bool:
    """True when the matrix maps axis-aligned boxes to axis-aligned boxes exactly."""
    return abs(matrix[0, 1]) < 1e-12 and abs(matrix[1, 0]) < 1e-12


def apply_matrix(matrix: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Apply an affine matrix to an Nx2 point array."""
    if len(points) == 0:
        return points
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (homogeneous @ matrix.T)[:, :2]


def extent(points: NDArray[np.float64]) -> Extent | None:
    """Compute (xmin, ymin, xmax, ymax), or None for an empty point set."""
    if len(points) == 0:
        return None
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def extent_corners(ext: Extent) -> NDArray[np.float64]:
    xmin, ymin, xmax, ymax = ext
    return np.array([[xmin, ymin], [xmax, ymin], [xmax, ymax], [xmin, ymax]])


def union_extents(extents: list[Extent]) -> Extent | None:
    if not extents:
        return None
    return (
        min(e[0] for e in extents),
        min(e[1] for e in extents),
        max(e[2] for e in extents),
        max(e[3] for e in extents),
    )


def ellipse_points(cx: float, cy: float, rx: float, ry: float, n: int = 100) -> NDArray[np.float64]:
    """Generate points along an ellipse."""
    angles = np.linspace(0, 2 * np.pi, n, endpoint=False)
    return np.column_stack([cx + rx * np.cos(angles), cy + ry * np.sin(angles)])
