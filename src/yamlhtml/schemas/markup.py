"""Markup tree models produced by the parser."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class RawNode(BaseModel):
    """A scalar field: ``key: "content"``.

    Attributes:
        key: Field name left of the colon.
        content: The unquoted scalar value (empty for ``key:`` with no value).
        anchor: Anchor name declared with ``&name``, if any.
    """

    kind: Literal["raw"] = "raw"
    key: str = Field(..., min_length=1)
    content: str = ""
    anchor: str | None = None


class ChildrenNode(BaseModel):
    """A nested mapping: ``key:`` followed by deeper-indented fields.

    Attributes:
        key: Field name left of the colon.
        children: Child nodes in document order, with aliases and
            overrides already resolved.
        anchor: Anchor name declared with ``&name``, if any.
    """

    kind: Literal["children"] = "children"
    key: str = Field(..., min_length=1)
    children: list[MarkupNode] = Field(default_factory=list)
    anchor: str | None = None


MarkupNode = Annotated[Union[RawNode, ChildrenNode], Field(discriminator="kind")]

ChildrenNode.model_rebuild()
