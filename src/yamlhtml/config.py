"""Local configuration for yamlhtml."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_NODES = 100_000
DEFAULT_TEMPLATES_DIR = "templates"
DEFAULT_STATIC_DIR = "static"
DEFAULT_STYLESHEET = "style.css"
DEFAULT_OUTPUT_DIR = "docs"
DEFAULT_INDEX_PAGE = "index"
DEFAULT_LOG_LEVEL = "INFO"

MARKUP_SUFFIXES = (".yaml", ".yml")

# Nesting limit for the recursive parser, alias expansion included.
YAMLHTML_MAX_DEPTH = int(os.getenv("YAMLHTML_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
# Upper bound on nodes per parse, alias and merge copies included.
YAMLHTML_MAX_NODES = int(os.getenv("YAMLHTML_MAX_NODES", str(DEFAULT_MAX_NODES)))
YAMLHTML_TEMPLATES_DIR = Path(os.getenv("YAMLHTML_TEMPLATES_DIR", DEFAULT_TEMPLATES_DIR)).expanduser()
YAMLHTML_STATIC_DIR = Path(os.getenv("YAMLHTML_STATIC_DIR", DEFAULT_STATIC_DIR)).expanduser()
YAMLHTML_STYLESHEET = os.getenv("YAMLHTML_STYLESHEET", DEFAULT_STYLESHEET)
YAMLHTML_OUTPUT_DIR = Path(os.getenv("YAMLHTML_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)).expanduser()
YAMLHTML_INDEX_PAGE = os.getenv("YAMLHTML_INDEX_PAGE", DEFAULT_INDEX_PAGE)
YAMLHTML_LOG_LEVEL = os.getenv("YAMLHTML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
