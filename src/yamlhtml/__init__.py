"""yamlhtml: write HTML pages as indented YAML-style markup."""

from yamlhtml.anchors import AnchorRegistry
from yamlhtml.exceptions import (
    AnchorReferenceError,
    BuildError,
    MarkupError,
    MarkupSyntaxError,
    NestingDepthError,
    NodeLimitError,
    StructuralError,
    TemplateLoadError,
    YamlHtmlError,
)
from yamlhtml.loader import load_page, load_template
from yamlhtml.page import render_page
from yamlhtml.rendering import convert, parse, render
from yamlhtml.schemas import (
    AttributeNode,
    ChildrenNode,
    ElementNode,
    HtmlNode,
    MarkupNode,
    RawNode,
    TextNode,
)
from yamlhtml.serializer import serialize
from yamlhtml.transpiler import transpile

__all__ = [
    "AnchorReferenceError",
    "AnchorRegistry",
    "AttributeNode",
    "BuildError",
    "ChildrenNode",
    "ElementNode",
    "HtmlNode",
    "MarkupError",
    "MarkupNode",
    "MarkupSyntaxError",
    "NestingDepthError",
    "NodeLimitError",
    "RawNode",
    "StructuralError",
    "TemplateLoadError",
    "TextNode",
    "YamlHtmlError",
    "convert",
    "load_page",
    "load_template",
    "parse",
    "render",
    "render_page",
    "serialize",
    "transpile",
]
