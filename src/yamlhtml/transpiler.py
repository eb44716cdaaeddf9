"""Transpile markup nodes into HTML nodes."""

from __future__ import annotations

from yamlhtml.schemas import (
    AttributeNode,
    ChildrenNode,
    ElementNode,
    HtmlNode,
    InertNode,
    MarkupNode,
    RawNode,
    TextNode,
)

CHILDREN_KEY = "children"
RAW_KEY = "raw"
INNER_TEXT_KEY = "innerText"


def transpile(
    node: MarkupNode,
    parent: ElementNode | None = None,
    *,
    enclosing_key: str | None = None,
) -> HtmlNode:
    """Transpile one markup node.

    Args:
        node: The markup node to convert.
        parent: The element the result will be appended to; None at the
            document root.
        enclosing_key: Key of the markup node whose child list holds
            ``node``. A key of ``children`` puts scalar fields in element
            position instead of attribute position.
    """
    if isinstance(node, ChildrenNode):
        return _transpile_children(node)
    if isinstance(node, RawNode):
        return _transpile_raw(node, parent, enclosing_key)
    return InertNode()


def _transpile_children(node: ChildrenNode) -> ElementNode:
    element = ElementNode(tag=node.key)

    for child in node.children:
        # `children:` contributes no element; its entries become our child elements.
        if isinstance(child, ChildrenNode) and child.key == CHILDREN_KEY:
            for grandchild in child.children:
                element.children.append(transpile(grandchild, element, enclosing_key=child.key))
        else:
            element.children.append(transpile(child, element, enclosing_key=node.key))

    return element


def _transpile_raw(node: RawNode, parent: ElementNode | None, enclosing_key: str | None) -> HtmlNode:
    is_html_position = parent is None or enclosing_key == CHILDREN_KEY

    if not is_html_position:
        if node.key == INNER_TEXT_KEY:
            return TextNode(text=node.content)
        return AttributeNode(name=node.key, value=node.content)

    text = TextNode(text=node.content)
    if node.key == RAW_KEY:
        return text
    return ElementNode(tag=node.key, children=[text])
