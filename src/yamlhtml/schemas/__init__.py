"""Shared schemas for yamlhtml."""

from yamlhtml.schemas.html import AttributeNode, ElementNode, HtmlNode, InertNode, TextNode
from yamlhtml.schemas.markup import ChildrenNode, MarkupNode, RawNode

__all__ = [
    "AttributeNode",
    "ChildrenNode",
    "ElementNode",
    "HtmlNode",
    "InertNode",
    "MarkupNode",
    "RawNode",
    "TextNode",
]
