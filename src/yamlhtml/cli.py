"""Command-line interface: render a page, build a static site, or serve pages."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from yamlhtml.build import build_site
from yamlhtml.config import (
    YAMLHTML_OUTPUT_DIR,
    YAMLHTML_STATIC_DIR,
    YAMLHTML_TEMPLATES_DIR,
)
from yamlhtml.exceptions import YamlHtmlError
from yamlhtml.loader import load_page, load_template, read_stylesheet
from yamlhtml.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yamlhtml", description="Turn YAML-style markup into HTML.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: YAMLHTML_LOG_LEVEL)")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Render one markup file to stdout")
    render.add_argument("file", type=Path, help="Markup file to render")
    render.add_argument("--page", action="store_true", help="Fill in page variables (title, style, source)")
    render.add_argument("--static", type=Path, default=YAMLHTML_STATIC_DIR, help="Static directory holding the stylesheet")
    render.add_argument("--title", default=None, help="Page title (default: file name)")

    build = commands.add_parser("build", help="Build a static site")
    build.add_argument("--source", type=Path, default=YAMLHTML_TEMPLATES_DIR, help="Directory of markup pages")
    build.add_argument("--output", type=Path, default=YAMLHTML_OUTPUT_DIR, help="Output directory")
    build.add_argument("--static", type=Path, default=YAMLHTML_STATIC_DIR, help="Static assets directory")
    build.add_argument("--pretty", action="store_true", help="Re-indent generated HTML")
    build.add_argument("--no-clean", dest="clean", action="store_false", help="Keep existing output files")

    serve = commands.add_parser("serve", help="Serve pages over HTTP")
    serve.add_argument("--host", default=DEFAULT_HOST)
    serve.add_argument("--port", type=int, default=DEFAULT_PORT)
    serve.add_argument("--templates", type=Path, default=YAMLHTML_TEMPLATES_DIR, help="Directory of markup pages")
    serve.add_argument("--static", type=Path, default=YAMLHTML_STATIC_DIR, help="Static assets directory")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level.upper())

    try:
        if args.command == "render":
            return _render(args)
        if args.command == "build":
            return _build(args)
        return _serve(args)
    except YamlHtmlError as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _render(args: argparse.Namespace) -> int:
    if args.page:
        html_text = load_page(args.file, style=read_stylesheet(args.static), title=args.title)
    else:
        html_text = load_template(args.file)
    sys.stdout.write(html_text)
    if not html_text.endswith("\n"):
        sys.stdout.write("\n")
    return 0


def _build(args: argparse.Namespace) -> int:
    written = asyncio.run(
        build_site(
            args.source,
            args.output,
            static_dir=args.static,
            pretty=args.pretty,
            clean=args.clean,
        )
    )
    for path in written:
        print(path)
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    from server.main import create_app

    logger.info("Starting yamlhtml server", extra={"host": args.host, "port": args.port})
    uvicorn.run(
        create_app(templates_dir=args.templates, static_dir=args.static),
        host=args.host,
        port=args.port,
        log_config=None,
    )
    return 0
