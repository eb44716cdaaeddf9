"""Anchor registry scoped to a single parse."""

from __future__ import annotations

from yamlhtml.exceptions import AnchorReferenceError
from yamlhtml.schemas import ChildrenNode, RawNode

# Characters that end an anchor or alias name.
NAME_DELIMITERS = frozenset(" \t\n\r#:&*")


def read_name(text: str, start: int) -> tuple[str, int]:
    """Read an anchor/alias name beginning at ``start``.

    Returns:
        The name and the index just past it.
    """
    end = start
    while end < len(text) and text[end] not in NAME_DELIMITERS:
        end += 1
    return text[start:end], end


class AnchorRegistry:
    """Maps anchor names to the nodes that declared them.

    Nodes are registered once their own subtree is fully parsed, so only
    content later in the document can refer to them.
    """

    def __init__(self) -> None:
        self._anchors: dict[str, RawNode | ChildrenNode] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._anchors

    def __len__(self) -> int:
        return len(self._anchors)

    def register(self, node: RawNode | ChildrenNode) -> None:
        """Record ``node`` under its anchor name; a later declaration replaces an earlier one."""
        if node.anchor:
            self._anchors[node.anchor] = node

    def resolve(self, name: str, *, line: str | None = None) -> RawNode | ChildrenNode:
        """Look up an anchor by name.

        Raises:
            AnchorReferenceError: If no node declared ``name``.
        """
        try:
            return self._anchors[name]
        except KeyError:
            known = ", ".join(sorted(self._anchors)) or "none"
            raise AnchorReferenceError(
                f"Unknown anchor {name!r} (declared anchors: {known})", line=line
            ) from None
