from __future__ import annotations

"""
Unit tests for the Markup Node Model.

Verifies text and child rendering, attribute ordering, the absence of a
void-element shortcut, and construction-time content checks.
"""

import io

import pytest

from autoindexer.markup import tags
from autoindexer.markup.node import Attribute, Children, Node, Text, element


def test_text_node_rendering() -> None:
    """A text node renders as open tag, verbatim text, close tag."""
    node = tags.p({}, Text("Hello, World!"))
    assert node.to_string() == "<p>Hello, World!</p>"


def test_node_with_attributes() -> None:
    """Attributes are rendered as key="value" pairs prefixed by a space."""
    node = tags.a({"href": "#", "class": "test-link"}, Text("Click me"))
    out = node.to_string()

    assert "<a " in out
    assert ' href="#"' in out
    assert ' class="test-link"' in out
    assert ">Click me</a>" in out


def test_attribute_insertion_order_is_render_order() -> None:
    node = element("a", {"href": "#", "class": "test-link"}, Text("Click me"))
    assert node.to_string() == '<a href="#" class="test-link">Click me</a>'


def test_duplicate_attribute_keys_are_preserved() -> None:
    """Pair sequences allow repeated keys; both are rendered in order."""
    node = element("div", [("class", "a"), ("class", "b")], Text(""))
    assert node.attributes == [Attribute("class", "a"), Attribute("class", "b")]
    assert node.to_string() == '<div class="a" class="b"></div>'


def test_nested_nodes() -> None:
    child = tags.p({}, Text("I am a child."))
    parent = tags.div({"id": "parent"}, Children([child]))

    assert parent.to_string() == '<div id="parent"><p>I am a child.</p></div>'


def test_void_element_gets_closing_tag() -> None:
    """Even conventionally void tags receive an explicit closing tag."""
    node = tags.meta({"charset": "UTF-8"}, Text(""))
    assert node.to_string() == '<meta charset="UTF-8"></meta>'


def test_multiple_children_preserve_order() -> None:
    child1 = tags.p({}, Text("First paragraph."))
    child2 = tags.div({}, Text("Second element is a div."))
    parent = tags.div({"id": "container"}, Children([child1, child2]))

    expected = (
        '<div id="container"><p>First paragraph.</p>'
        "<div>Second element is a div.</div></div>"
    )
    assert parent.to_string() == expected


def test_empty_children_render_empty_body() -> None:
    assert tags.tbody({}, Children([])).to_string() == "<tbody></tbody>"


def test_text_is_not_escaped() -> None:
    """Trusted input: markup characters pass through untouched."""
    node = tags.td({"title": "a&b"}, Text("<b>bold</b> & more"))
    assert node.to_string() == '<td title="a&b"><b>bold</b> & more</td>'


def test_render_writes_into_sink() -> None:
    buffer = io.StringIO()
    tags.h1({}, Text("Title")).render(buffer)
    assert buffer.getvalue() == "<h1>Title</h1>"


def test_render_propagates_writer_errors() -> None:
    """A failing sink aborts rendering with its own error."""

    class FailingWriter:
        def __init__(self) -> None:
            self.calls = 0

        def write(self, s: str) -> int:
            self.calls += 1
            if self.calls > 1:
                raise OSError("disk full")
            return len(s)

    node = tags.div({}, Children([tags.p({}, Text("x"))]))
    with pytest.raises(OSError, match="disk full"):
        node.render(FailingWriter())


def test_content_variant_is_explicit() -> None:
    """Only Text or Children are accepted as content."""
    with pytest.raises(TypeError):
        element("p", {}, "plain string")  # type: ignore[arg-type]

    with pytest.raises(TypeError):
        element("div", {}, [tags.p({}, Text("x"))])  # type: ignore[arg-type]


def test_node_accessors() -> None:
    leaf = tags.p({}, Text("leaf"))
    branch = tags.div({}, Children([leaf]))

    assert leaf.is_text
    assert leaf.children == ()
    assert not branch.is_text
    assert branch.children == (leaf,)
    assert isinstance(branch, Node)


def test_children_accepts_any_iterable() -> None:
    items = (tags.p({}, Text(str(i))) for i in range(3))
    node = tags.div({}, Children(items))
    assert node.to_string() == "<div><p>0</p><p>1</p><p>2</p></div>"
