"""Custom exceptions for yamlhtml."""

from __future__ import annotations


class YamlHtmlError(Exception):
    """Base exception for yamlhtml operations."""


class MarkupError(YamlHtmlError):
    """Error while parsing markup.

    Attributes:
        line: The offending source line, if known.
    """

    def __init__(self, message: str, *, line: str | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message}: {line.strip()!r}"
        super().__init__(message)


class StructuralError(MarkupError):
    """Indentation or grouping does not describe a valid node."""


class NestingDepthError(StructuralError):
    """Markup is nested deeper than the configured limit."""


class NodeLimitError(StructuralError):
    """Markup expands to more nodes than the configured limit."""


class MarkupSyntaxError(MarkupError):
    """A definition line is malformed (missing colon, unterminated quote)."""


class AnchorReferenceError(MarkupError):
    """An alias or override cannot be resolved."""


class TemplateLoadError(YamlHtmlError):
    """A markup, template or stylesheet file could not be read."""


class BuildError(YamlHtmlError):
    """Error during a static site build."""
