"""Owned SVG node tree — parse markup fragments into nodes, serialize them back.

Each node owns its children. Geometry and transform code walks this tree
directly; nothing depends on a live document.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_NS_PREFIXES = {SVG_NS: "", XLINK_NS: "xlink:"}

# Fragments are parsed inside this wrapper so un-declared prefixes still resolve.
_WRAPPER_OPEN = f'<g xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}">'
_WRAPPER_CLOSE = "</g>"

_ATTR_ENTITIES = {'"': "&quot;"}


@dataclass
class SvgNode:
    """A single SVG element and the subtree it owns."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[SvgNode] = field(default_factory=list)
    # Character data directly inside the element, and after its closing tag
    text: str = ""
    tail: str = ""
    # Name of the layer that produced this node (not serialized)
    layer: str | None = None

    def append(self, child: SvgNode) -> SvgNode:
        self.children.append(child)
        return child

    def iter(self) -> Iterator[SvgNode]:
        """Depth-first, pre-order walk over this node and every descendant."""
        yield self
        for child in self.children:
            yield from child.iter()

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def set(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def to_markup(self) -> str:
        return serialize_node(self)


def _strip_ns(name: str) -> str:
    if name.startswith("{"):
        ns, local = name[1:].split("}", 1)
        return _NS_PREFIXES.get(ns, "") + local
    return name


def _from_element(element: ET.Element) -> SvgNode:
    node = SvgNode(
        tag=_strip_ns(element.tag),
        attributes={_strip_ns(k): v for k, v in element.attrib.items()},
        text=element.text or "",
        tail=element.tail or "",
    )
    for child in element:
        node.children.append(_from_element(child))
    return node


def parse_fragment(markup: str) -> SvgNode:
    """Parse a markup fragment into a ``<g>`` node owning its top-level elements.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed markup.
    """
    root = ET.fromstring(_WRAPPER_OPEN + markup + _WRAPPER_CLOSE)
    wrapper = _from_element(root)
    wrapper.attributes.clear()
    wrapper.tail = ""
    return wrapper


def serialize_node(node: SvgNode) -> str:
    """Serialize a node and its subtree as compact markup."""
    parts = [f"<{node.tag}"]
    for k, v in node.attributes.items():
        parts.append(f' {k}="{escape(v, _ATTR_ENTITIES)}"')

    if not node.children and not node.text:
        parts.append("/>")
    else:
        parts.append(">")
        parts.append(escape(node.text))
        for child in node.children:
            parts.append(serialize_node(child))
        parts.append(f"</{node.tag}>")

    parts.append(escape(node.tail))
    return "".join(parts)
