"""Centered rotate / scale / translate for SVG nodes.

Every operation measures the node with ``local_bbox`` and appends one more
entry to its ``transform`` attribute. The appended entry is innermost, so it
acts in the node's local space, which is the space the bounding box was
measured in. Callers apply them per instance as translate → rotate → scale.
"""

from __future__ import annotations

from portrait.svg.bbox import local_bbox
from portrait.svg.node import SvgNode
from portrait.utils.math_helpers import format_number as fmt
from portrait.utils.math_helpers import js_divide, parse_leading_float


def add_transform(node: SvgNode, new_transform: str) -> None:
    old = node.get("transform")
    node.set("transform", f"{old} {new_transform}" if old else new_transform)


def rotate_centered(node: SvgNode, angle: float) -> None:
    """Rotate by ``angle`` degrees about the center of the node's bounding box."""
    box = local_bbox(node)
    add_transform(node, f"rotate({fmt(angle)} {fmt(box.cx)} {fmt(box.cy)})")


def scale_stroke_width(node: SvgNode, factor: float) -> None:
    """Divide every stroke-width in the subtree by ``factor``."""
    for n in node.iter():
        value = n.get("stroke-width")
        if not value:
            continue
        parsed = parse_leading_float(value)
        if parsed is not None:
            n.set("stroke-width", fmt(js_divide(parsed, factor)))


def scale_centered(node: SvgNode, x: float, y: float) -> None:
    """Scale about the center of the node's bounding box.

    x = y = 1 leaves the node unchanged. Negative x mirrors horizontally.
    Apparent stroke width is kept constant by dividing stroke-width by the
    mean absolute scale.
    """
    box = local_bbox(node)
    # A zero factor yields an infinite offset, as in the browser
    tx = js_divide(box.cx * (1 - x), x)
    ty = js_divide(box.cy * (1 - y), y)

    add_transform(node, f"scale({fmt(x)} {fmt(y)}) translate({fmt(tx)} {fmt(ty)})")

    factor = (abs(x) + abs(y)) / 2
    if factor != 1:
        scale_stroke_width(node, factor)


def translate(
    node: SvgNode,
    x: float,
    y: float,
    x_align: str = "center",
    y_align: str = "center",
) -> None:
    """Move the node so a reference point of its box lands on (x, y).

    The reference point is the box center by default; ``x_align`` may be
    "left"/"right" and ``y_align`` "top"/"bottom" to use an edge instead.
    """
    box = local_bbox(node)

    if x_align == "left":
        rx = box.x
    elif x_align == "right":
        rx = box.right
    else:
        rx = box.cx

    if y_align == "top":
        ry = box.y
    elif y_align == "bottom":
        ry = box.bottom
    else:
        ry = box.cy

    add_transform(node, f"translate({fmt(x - rx)} {fmt(y - ry)})")
