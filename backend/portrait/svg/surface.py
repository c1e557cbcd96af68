"""Rendering surface and the container that holds it."""

from __future__ import annotations

import logging

from portrait.svg.node import SVG_NS, XLINK_NS, SvgNode, parse_fragment, serialize_node

logger = logging.getLogger(__name__)

DEFAULT_VIEW_BOX = "0 0 400 600"


class ContainerNotFoundError(LookupError):
    """The target container could not be resolved; nothing was drawn."""


class SvgSurface:
    """An ``<svg>`` root that accepts markup and answers bounding-box queries.

    Nodes are only ever appended; earlier nodes are never removed or
    reordered, so document order is paint order.
    """

    def __init__(self, view_box: str = DEFAULT_VIEW_BOX) -> None:
        self.root = SvgNode(
            "svg",
            {
                "xmlns": SVG_NS,
                "xmlns:xlink": XLINK_NS,
                "version": "1.2",
                "baseProfile": "tiny",
                "width": "100%",
                "height": "100%",
                "viewBox": view_box,
                "preserveAspectRatio": "xMinYMin meet",
            },
        )

    @property
    def nodes(self) -> list[SvgNode]:
        return self.root.children

    @property
    def last_child(self) -> SvgNode | None:
        return self.root.children[-1] if self.root.children else None

    def append_markup(self, markup: str, layer: str | None = None) -> SvgNode:
        """Wrap ``markup`` in a ``<g>`` and append it as the topmost node."""
        node = parse_fragment(markup)
        node.layer = layer
        self.root.append(node)
        return node

    def layers(self) -> list[str]:
        """Layer name of each appended node, in paint order."""
        return [n.layer for n in self.root.children if n.layer is not None]

    def to_markup(self) -> str:
        return serialize_node(self.root)


class Container:
    """A named slot that displays at most one surface at a time."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.children: list[SvgSurface] = []

    def clear(self) -> None:
        self.children.clear()

    def append(self, surface: SvgSurface) -> None:
        self.children.append(surface)

    @property
    def surface(self) -> SvgSurface | None:
        return self.children[-1] if self.children else None


def resolve_container(
    container: Container | str | None,
    containers: dict[str, Container] | None = None,
) -> Container:
    """Resolve a container reference or lookup key.

    Raises ContainerNotFoundError when nothing matches.
    """
    if isinstance(container, Container):
        return container
    if isinstance(container, str):
        found = (containers or {}).get(container)
        if found is not None:
            return found
    logger.error("Container not found: %r", container)
    raise ContainerNotFoundError("container not found")
