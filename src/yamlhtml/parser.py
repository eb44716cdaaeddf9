"""Parse indented markup lines into a tree of markup nodes.

Every group of lines (a defining line plus its deeper continuation lines) is
classified as a scalar field, a nested mapping, an alias (``key: *name``) or
a merge override (``<<: *name``). Aliases and overrides are resolved against
the anchors declared earlier in the same document and never appear in the
resulting tree.
"""

from __future__ import annotations

from enum import Enum

from yamlhtml.anchors import AnchorRegistry, read_name
from yamlhtml.config import YAMLHTML_MAX_DEPTH, YAMLHTML_MAX_NODES
from yamlhtml.exceptions import (
    AnchorReferenceError,
    MarkupSyntaxError,
    NestingDepthError,
    NodeLimitError,
    StructuralError,
)
from yamlhtml.lines import collect_groups, get_indentation
from yamlhtml.schemas import ChildrenNode, MarkupNode, RawNode

QUOTE_CHARS = ("'", '"')
OVERRIDE_KEY = "<<"
_ESCAPE_CHAR = "\\"
_COMMENT_CHAR = "#"
_ANCHOR_CHAR = "&"
_ALIAS_CHAR = "*"


class NodeType(str, Enum):
    """Classification of a line group."""

    RAW = "raw"
    CHILDREN = "children"
    ALIAS = "alias"
    OVERRIDE = "override"


def determine_node_type(lines: list[str]) -> NodeType:
    """Classify a group from its defining line and indentation shape.

    Raises:
        StructuralError: If the group is empty, is a lone line with no
            quoted value, or holds a later line at the definition's own
            indentation.
        MarkupSyntaxError: If an alias definition has no colon.
    """
    if not lines:
        raise StructuralError("Cannot determine node type of an empty group")

    definition = lines[0]

    if any(quote in definition for quote in QUOTE_CHARS):
        return NodeType.RAW

    if _find_unquoted(definition, _ALIAS_CHAR) != -1:
        if parse_key(definition) == OVERRIDE_KEY:
            return NodeType.OVERRIDE
        return NodeType.ALIAS

    if len(lines) < 2:
        raise StructuralError("Field has neither a quoted value nor nested fields", line=definition)

    indentation = get_indentation(definition)
    if get_indentation(lines[1]) <= indentation:
        return NodeType.RAW

    for line in lines[2:]:
        if get_indentation(line) == indentation:
            raise StructuralError("Ambiguous structure: line at the definition's indentation", line=line)

    return NodeType.CHILDREN


def parse_key(line: str) -> str:
    """Extract the field key: left of the first colon, minus any ``- `` list marker.

    Raises:
        MarkupSyntaxError: If the line has no colon or the key is empty.
    """
    left, colon, _ = line.partition(":")
    if not colon:
        raise MarkupSyntaxError("Missing colon in definition", line=line)

    key = left.strip().lstrip("- ")
    if not key:
        raise MarkupSyntaxError("Empty key in definition", line=line)
    return key


def extract_raw_content(line: str) -> str:
    """Extract the quoted scalar right of the first colon.

    A backslash makes the next character literal, so ``\\"`` inside a
    double-quoted value is a quote character rather than the closing quote.
    A ``#`` outside quotes starts a comment. Text outside quotes is dropped.

    Raises:
        MarkupSyntaxError: If the line has no colon or a quote is left open.
    """
    _, colon, right = line.partition(":")
    if not colon:
        raise MarkupSyntaxError("Missing colon in definition", line=line)

    value: list[str] = []
    quote: str | None = None
    escaped = False

    for char in right:
        if char == _COMMENT_CHAR and quote is None:
            break

        if char == _ESCAPE_CHAR and not escaped:
            escaped = True
            continue

        if char in QUOTE_CHARS and not escaped:
            if quote is None:
                quote = char
            elif char == quote:
                quote = None
            else:
                value.append(char)
        elif quote is not None:
            value.append(char)

        escaped = False

    if quote is not None:
        raise MarkupSyntaxError("Missing closing quote", line=line)

    return "".join(value)


def extract_anchor_name(line: str) -> tuple[str, str | None]:
    """Remove an ``&name`` declaration from a line.

    Only an ``&`` outside quotes and before any comment declares an anchor;
    inside a quoted value it is content.

    Returns:
        The line without the declaration and the anchor name, or the
        unchanged line and None when nothing is declared.
    """
    index = _find_unquoted(line, _ANCHOR_CHAR)
    if index == -1:
        return line, None

    name, end = read_name(line, index + 1)
    return line[:index] + line[end:], name or None


def extract_alias_name(line: str) -> str:
    """Return the anchor name referenced by ``*name``.

    Raises:
        AnchorReferenceError: If the line has no ``*``.
    """
    index = _find_unquoted(line, _ALIAS_CHAR)
    if index == -1:
        raise AnchorReferenceError("Missing alias reference", line=line)
    name, _ = read_name(line, index + 1)
    return name


def _find_unquoted(line: str, target: str) -> int:
    """Index of the first ``target`` outside quotes and comments, or -1."""
    quote: str | None = None
    escaped = False

    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == _ESCAPE_CHAR:
            escaped = True
        elif quote is not None:
            if char == quote:
                quote = None
        elif char in QUOTE_CHARS:
            quote = char
        elif char == _COMMENT_CHAR:
            return -1
        elif char == target:
            return index

    return -1


def measure_tree(node: MarkupNode) -> tuple[int, int]:
    """Return the height and node count of a subtree; a lone node has height 1."""
    height = size = 0
    stack: list[tuple[MarkupNode, int]] = [(node, 1)]
    while stack:
        current, level = stack.pop()
        size += 1
        height = max(height, level)
        if isinstance(current, ChildrenNode):
            stack.extend((child, level + 1) for child in current.children)
    return height, size


def copy_tree(node: MarkupNode) -> MarkupNode:
    """Deep-copy a markup subtree."""
    if isinstance(node, ChildrenNode):
        return node.model_copy(update={"children": [copy_tree(child) for child in node.children]})
    return node.model_copy()


class _ParseState:
    """Anchors and limits shared by every group of one parse."""

    def __init__(self, max_depth: int, max_nodes: int) -> None:
        self.registry = AnchorRegistry()
        self.max_depth = max_depth
        self.max_nodes = max_nodes
        self.node_count = 0

    def check_depth(self, deepest: int, line: str) -> None:
        if deepest > self.max_depth:
            raise NestingDepthError(f"Markup nested deeper than {self.max_depth} levels", line=line)

    def add_nodes(self, count: int, line: str) -> None:
        self.node_count += count
        if self.node_count > self.max_nodes:
            raise NodeLimitError(f"Markup expands to more than {self.max_nodes} nodes", line=line)


def parse_lines(
    lines: list[str],
    *,
    max_depth: int | None = None,
    max_nodes: int | None = None,
) -> list[MarkupNode]:
    """Build the markup forest for already-filtered lines.

    Top-level groups are parsed in document order against a registry that
    lives only for this call. Both limits count the tree as it is after
    aliases and overrides are expanded.

    Raises:
        StructuralError: On invalid indentation or grouping.
        NestingDepthError: If the tree is deeper than ``max_depth``.
        NodeLimitError: If the tree holds more than ``max_nodes`` nodes.
        MarkupSyntaxError: On malformed definition lines.
        AnchorReferenceError: On unresolvable aliases or overrides.
    """
    state = _ParseState(
        max_depth=YAMLHTML_MAX_DEPTH if max_depth is None else max_depth,
        max_nodes=YAMLHTML_MAX_NODES if max_nodes is None else max_nodes,
    )
    nodes: list[MarkupNode] = []
    for group in collect_groups(lines):
        nodes.extend(_parse_group(group, state, depth=1))
    return nodes


def _parse_group(lines: list[str], state: _ParseState, *, depth: int) -> list[MarkupNode]:
    """Parse one group; an override may expand to any number of sibling nodes."""
    state.check_depth(depth, lines[0])

    node_type = determine_node_type(lines)

    if node_type is NodeType.RAW:
        state.add_nodes(1, lines[0])
        return [_parse_raw(lines, state.registry)]
    if node_type is NodeType.CHILDREN:
        state.add_nodes(1, lines[0])
        return [_parse_children(lines, state, depth=depth)]
    if node_type is NodeType.ALIAS:
        return [_parse_alias(lines, state, depth=depth)]
    return _parse_override(lines, state, depth=depth)


def _parse_raw(lines: list[str], registry: AnchorRegistry) -> RawNode:
    definition, anchor = extract_anchor_name(lines[0])
    if len(lines) > 1 and get_indentation(lines[1]) > get_indentation(lines[0]):
        raise StructuralError("Quoted value cannot have nested fields", line=lines[0])

    node = RawNode(
        key=parse_key(definition),
        content=extract_raw_content(lines[0]),
        anchor=anchor,
    )
    registry.register(node)
    return node


def _parse_children(lines: list[str], state: _ParseState, *, depth: int) -> ChildrenNode:
    definition, anchor = extract_anchor_name(lines[0])
    key = parse_key(definition)

    children: list[MarkupNode] = []
    for group in collect_groups(lines[1:]):
        children.extend(_parse_group(group, state, depth=depth + 1))

    node = ChildrenNode(key=key, children=children, anchor=anchor)
    state.registry.register(node)
    return node


def _parse_alias(lines: list[str], state: _ParseState, *, depth: int) -> ChildrenNode:
    definition = lines[0]
    target = state.registry.resolve(extract_alias_name(definition), line=definition)

    # The copy sits one level below the wrapper element.
    height, size = measure_tree(target)
    state.check_depth(depth + height, definition)
    state.add_nodes(size + 1, definition)

    return ChildrenNode(key=parse_key(definition), children=[copy_tree(target)])


def _parse_override(lines: list[str], state: _ParseState, *, depth: int) -> list[MarkupNode]:
    definition = lines[0]
    target = state.registry.resolve(extract_alias_name(definition), line=definition)
    if not isinstance(target, ChildrenNode):
        raise AnchorReferenceError(
            f"Override target {target.key!r} is not a mapping", line=definition
        )

    # The target's children land at the override's own level.
    height, size = measure_tree(target)
    state.check_depth(depth + height - 2, definition)
    state.add_nodes(size - 1, definition)

    return [copy_tree(child) for child in target.children]
