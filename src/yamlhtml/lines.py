"""Line preprocessing and indentation grouping."""

from __future__ import annotations

from typing import Iterable

from yamlhtml.exceptions import StructuralError

TAB_WIDTH = 4


def get_indentation(line: str) -> int:
    """Count leading indentation columns; a tab counts as ``TAB_WIDTH`` columns."""
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += TAB_WIDTH
        else:
            break
    return width


def is_ignorable(line: str) -> bool:
    """True for blank lines and lines holding only a comment."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def split_lines(text: str) -> list[str]:
    """Split text into lines, dropping blank and comment-only lines.

    Kept lines retain their original indentation.
    """
    return filter_lines(text.splitlines())


def filter_lines(lines: Iterable[str]) -> list[str]:
    """Drop blank and comment-only lines, trimming trailing newline characters."""
    return [line.rstrip("\r\n") for line in lines if not is_ignorable(line)]


def collect_groups(lines: list[str]) -> list[list[str]]:
    """Split lines into groups of a defining line plus its deeper continuation lines.

    The indentation of the first line is the group level. Every line at that
    level starts a new group; deeper lines belong to the current one.

    Raises:
        StructuralError: If a line is indented below the group level.
    """
    if not lines:
        return []

    level = get_indentation(lines[0])
    groups: list[list[str]] = []
    current: list[str] = []

    for line in lines:
        indentation = get_indentation(line)
        if indentation < level:
            raise StructuralError("Indentation below group level", line=line)
        if indentation == level and current:
            groups.append(current)
            current = []
        current.append(line)

    groups.append(current)
    return groups
