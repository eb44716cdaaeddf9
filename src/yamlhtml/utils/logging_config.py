"""Logging setup shared by the library, the CLI and the server."""

from __future__ import annotations

import logging
import sys

from yamlhtml.config import YAMLHTML_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes present on every LogRecord; anything else came in through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime"}
)

_configured = False


class ExtraFormatter(logging.Formatter):
    """Formatter that appends ``extra={...}`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not extras:
            return message
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} [{fields}]"


def configure_logging(level: str | int | None = None) -> None:
    """Install a stderr handler on the root logger.

    Calling it again only updates the level.
    """
    global _configured

    root = logging.getLogger()
    if _configured:
        if level is not None:
            root.setLevel(level)
        return

    root.setLevel(level or YAMLHTML_LOG_LEVEL)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(name)
