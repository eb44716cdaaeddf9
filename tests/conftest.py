"""Test setup for yamlhtml."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A small site: two markup pages and a static directory with a stylesheet."""
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "index.yaml").write_text(
        "html:\n"
        "  children:\n"
        "    - head:\n"
        "        children:\n"
        '          - title: "${title}"\n'
        '          - style: "${style}"\n'
        "    - body:\n"
        "        children:\n"
        '          - h1: "Welcome"\n'
        '          - a: "About"\n',
        encoding="utf-8",
    )
    (templates / "about.yml").write_text(
        "div:\n"
        '  class: "about"\n'
        "  children:\n"
        '    - p: "About us"\n',
        encoding="utf-8",
    )
    static = tmp_path / "static"
    static.mkdir()
    (static / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (static / "logo.svg").write_text("<svg></svg>", encoding="utf-8")
    return tmp_path
