"""Tests for the owned SVG node tree."""

import xml.etree.ElementTree as ET

import pytest

from portrait.svg.node import SvgNode, parse_fragment, serialize_node


def test_parse_fragment_wraps_in_group():
    node = parse_fragment('<rect x="1" y="2" width="3" height="4"/><circle r="5"/>')
    assert node.tag == "g"
    assert node.attributes == {}
    assert [c.tag for c in node.children] == ["rect", "circle"]
    assert node.children[0].attributes["width"] == "3"


def test_parse_fragment_empty_markup():
    node = parse_fragment("")
    assert node.tag == "g"
    assert node.children == []


def test_parse_fragment_nested_and_xlink():
    node = parse_fragment('<g id="a"><use xlink:href="#b"/></g>')
    use = node.children[0].children[0]
    assert use.tag == "use"
    assert use.attributes["xlink:href"] == "#b"


def test_parse_fragment_malformed_raises():
    with pytest.raises(ET.ParseError):
        parse_fragment("<rect")


def test_iter_visits_every_depth():
    node = parse_fragment('<g><g><rect/></g></g><path d="M0 0 L1 1"/>')
    tags = [n.tag for n in node.iter()]
    assert tags == ["g", "g", "g", "rect", "path"]


def test_serialize_self_closing_and_text():
    node = SvgNode("g", children=[SvgNode("rect", {"width": "2"}), SvgNode("text", text="a<b")])
    assert serialize_node(node) == '<g><rect width="2"/><text>a&lt;b</text></g>'


def test_serialize_escapes_quotes_in_attributes():
    node = SvgNode("path", {"data-x": 'say "hi"'})
    assert node.to_markup() == '<path data-x="say &quot;hi&quot;"/>'


def test_parse_then_serialize_keeps_attributes():
    markup = '<rect x="1" fill="$[skinColor]"/>'
    node = parse_fragment(markup)
    assert serialize_node(node) == "<g>" + markup + "</g>"
