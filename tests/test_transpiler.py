"""Tests for the HTML transpiler."""

from __future__ import annotations

from yamlhtml.schemas import (
    AttributeNode,
    ChildrenNode,
    ElementNode,
    InertNode,
    RawNode,
    TextNode,
)
from yamlhtml.transpiler import transpile


def _children_scope(*nodes: RawNode | ChildrenNode) -> ChildrenNode:
    return ChildrenNode(key="children", children=list(nodes))


class TestTranspileRawNode:
    """Tests for scalar fields."""

    def test_top_level_field_is_element(self) -> None:
        """At the root a field becomes an element wrapping its text."""
        assert transpile(RawNode(key="tag", content="value")) == ElementNode(
            tag="tag", children=[TextNode(text="value")]
        )

    def test_top_level_raw_is_text(self) -> None:
        """The raw keyword emits bare text."""
        assert transpile(RawNode(key="raw", content="<!DOCTYPE html>")) == TextNode(text="<!DOCTYPE html>")

    def test_top_level_inner_text_is_element(self) -> None:
        """innerText in element position is wrapped like any other tag."""
        assert transpile(RawNode(key="innerText", content="x")) == ElementNode(
            tag="innerText", children=[TextNode(text="x")]
        )

    def test_field_of_element_is_attribute(self) -> None:
        """Fields of a mapping become attributes."""
        node = ChildrenNode(key="a", children=[RawNode(key="href", content="/home")])
        assert transpile(node) == ElementNode(
            tag="a", children=[AttributeNode(name="href", value="/home")]
        )

    def test_inner_text_of_element_is_text(self) -> None:
        """innerText sets text next to sibling attributes."""
        node = ChildrenNode(
            key="a",
            children=[
                RawNode(key="href", content="/home"),
                RawNode(key="innerText", content="Home"),
            ],
        )
        assert transpile(node) == ElementNode(
            tag="a",
            children=[AttributeNode(name="href", value="/home"), TextNode(text="Home")],
        )

    def test_explicit_parent_with_children_context(self) -> None:
        """A field listed under children: is an element even below the root."""
        parent = ElementNode(tag="div")
        assert transpile(RawNode(key="p", content="hi"), parent, enclosing_key="children") == ElementNode(
            tag="p", children=[TextNode(text="hi")]
        )

    def test_explicit_parent_with_other_context(self) -> None:
        """Without a children: context the field is an attribute."""
        parent = ElementNode(tag="div")
        assert transpile(RawNode(key="id", content="x"), parent, enclosing_key="div") == AttributeNode(
            name="id", value="x"
        )


class TestTranspileChildrenNode:
    """Tests for mappings."""

    def test_empty_mapping(self) -> None:
        """A mapping is always an element."""
        assert transpile(ChildrenNode(key="div")) == ElementNode(tag="div")

    def test_children_scope_is_flattened(self) -> None:
        """children: contributes no element of its own."""
        node = ChildrenNode(key="tag", children=[_children_scope(RawNode(key="child", content="value"))])
        assert transpile(node) == ElementNode(
            tag="tag",
            children=[ElementNode(tag="child", children=[TextNode(text="value")])],
        )

    def test_raw_in_children_scope(self) -> None:
        """raw under children: emits text between sibling elements."""
        node = ChildrenNode(
            key="p",
            children=[
                _children_scope(
                    RawNode(key="raw", content="Hello "),
                    RawNode(key="b", content="world"),
                )
            ],
        )
        assert transpile(node) == ElementNode(
            tag="p",
            children=[TextNode(text="Hello "), ElementNode(tag="b", children=[TextNode(text="world")])],
        )

    def test_nested_children_scope_keeps_inner_element(self) -> None:
        """A children: directly inside children: is an element named children."""
        node = ChildrenNode(
            key="tag",
            children=[_children_scope(_children_scope(RawNode(key="grandchild", content="value")))],
        )
        assert transpile(node) == ElementNode(
            tag="tag",
            children=[
                ElementNode(
                    tag="children",
                    children=[ElementNode(tag="grandchild", children=[TextNode(text="value")])],
                )
            ],
        )

    def test_raw_children_key_is_attribute(self) -> None:
        """Only a mapping named children is a scope; a scalar one is an attribute."""
        node = ChildrenNode(key="div", children=[RawNode(key="children", content="x")])
        assert transpile(node) == ElementNode(
            tag="div", children=[AttributeNode(name="children", value="x")]
        )

    def test_mixed_fields_and_children(self) -> None:
        """Attributes and child elements keep their relative order."""
        node = ChildrenNode(
            key="ul",
            children=[
                RawNode(key="class", content="list"),
                _children_scope(RawNode(key="li", content="1"), RawNode(key="li", content="2")),
                RawNode(key="id", content="items"),
            ],
        )
        assert transpile(node) == ElementNode(
            tag="ul",
            children=[
                AttributeNode(name="class", value="list"),
                ElementNode(tag="li", children=[TextNode(text="1")]),
                ElementNode(tag="li", children=[TextNode(text="2")]),
                AttributeNode(name="id", value="items"),
            ],
        )

    def test_nested_mapping_under_field(self) -> None:
        """A nested mapping outside children: is still an element."""
        node = ChildrenNode(
            key="div",
            children=[ChildrenNode(key="span", children=[RawNode(key="class", content="x")])],
        )
        assert transpile(node) == ElementNode(
            tag="div",
            children=[ElementNode(tag="span", children=[AttributeNode(name="class", value="x")])],
        )

    def test_does_not_mutate_markup(self) -> None:
        """Transpiling leaves the markup tree untouched."""
        node = ChildrenNode(key="tag", children=[_children_scope(RawNode(key="child", content="value"))])
        before = node.model_copy(deep=True)
        transpile(node)
        assert node == before


class TestTranspileUnknown:
    """Tests for input that is not a markup node."""

    def test_unknown_input_is_inert(self) -> None:
        """Anything else becomes an inert node."""
        assert transpile("not a node") == InertNode()  # type: ignore[arg-type]
