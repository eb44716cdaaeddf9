"""Substitute page-level variables into a rendered page."""

from __future__ import annotations

import html
from string import Template


def render_page(fragment: str, *, title: str = "", style: str = "", source: str = "") -> str:
    """Fill ``${title}``, ``${style}`` and ``${source}`` placeholders in a rendered page.

    ``title`` and ``source`` are escaped as text; ``style`` is inserted as is.
    Any other ``$`` sequence is left untouched.
    """
    return Template(fragment).safe_substitute(
        title=html.escape(title),
        style=style,
        source=html.escape(source),
    )
