"""Serialize HTML nodes to text."""

from __future__ import annotations

from yamlhtml.schemas import AttributeNode, ElementNode, HtmlNode, TextNode


def serialize(node: HtmlNode) -> str:
    """Render an HTML node.

    Attributes of an element always go into its opening tag, whatever their
    position among its children. Text and attribute values are not escaped
    and every element gets an explicit closing tag.
    """
    if isinstance(node, TextNode):
        return node.text
    if isinstance(node, AttributeNode):
        return _serialize_attribute(node)
    if isinstance(node, ElementNode):
        return _serialize_element(node)
    return ""


def _serialize_attribute(node: AttributeNode) -> str:
    return f'{node.name}="{node.value}"'


def _serialize_element(node: ElementNode) -> str:
    attributes: list[str] = []
    content: list[str] = []
    for child in node.children:
        if isinstance(child, AttributeNode):
            attributes.append(" " + _serialize_attribute(child))
        else:
            content.append(serialize(child))
    return f"<{node.tag}{''.join(attributes)}>{''.join(content)}</{node.tag}>"
