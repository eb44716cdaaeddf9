"""HTML tree models produced by the transpiler."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class TextNode(BaseModel):
    """Literal text, rendered without escaping."""

    kind: Literal["text"] = "text"
    text: str


class AttributeNode(BaseModel):
    """An attribute of the enclosing element, rendered as ``name="value"``."""

    kind: Literal["attribute"] = "attribute"
    name: str
    value: str


class ElementNode(BaseModel):
    """An HTML element with attribute, element and text children."""

    kind: Literal["element"] = "element"
    tag: str
    children: list[HtmlNode] = Field(default_factory=list)


class InertNode(BaseModel):
    """Placeholder for input the transpiler does not understand; renders as nothing."""

    kind: Literal["inert"] = "inert"


HtmlNode = Annotated[
    Union[TextNode, AttributeNode, ElementNode, InertNode],
    Field(discriminator="kind"),
]

ElementNode.model_rebuild()
