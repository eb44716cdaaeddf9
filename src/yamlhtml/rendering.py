"""Public entry points: markup text to markup tree to HTML text."""

from __future__ import annotations

import logging
from typing import Iterable

from yamlhtml.exceptions import NestingDepthError
from yamlhtml.lines import split_lines
from yamlhtml.parser import parse_lines
from yamlhtml.schemas import MarkupNode
from yamlhtml.serializer import serialize
from yamlhtml.transpiler import transpile

logger = logging.getLogger(__name__)


def parse(
    text: str,
    *,
    max_depth: int | None = None,
    max_nodes: int | None = None,
) -> list[MarkupNode]:
    """Parse markup text into one node per top-level group.

    Blank and comment-only lines are ignored; an empty document yields an
    empty list.

    Raises:
        StructuralError, MarkupSyntaxError, AnchorReferenceError: If the
            markup is invalid. Nothing is returned for a partially valid
            document.
        NestingDepthError: Also raised when the interpreter's recursion
            limit is hit before ``max_depth``.
    """
    try:
        nodes = parse_lines(split_lines(text), max_depth=max_depth, max_nodes=max_nodes)
    except RecursionError:
        raise NestingDepthError("Markup nested too deeply to parse") from None
    logger.debug("Parsed %d top-level markup nodes", len(nodes))
    return nodes


def render(nodes: Iterable[MarkupNode]) -> str:
    """Transpile and serialize each top-level node, concatenated in order."""
    try:
        return "".join(serialize(transpile(node)) for node in nodes)
    except RecursionError:
        raise NestingDepthError("Markup nested too deeply to render") from None


def convert(
    text: str,
    *,
    max_depth: int | None = None,
    max_nodes: int | None = None,
) -> str:
    """Convert markup text straight to an HTML fragment."""
    return render(parse(text, max_depth=max_depth, max_nodes=max_nodes))
