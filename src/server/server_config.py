"""Configuration for the server."""

from __future__ import annotations

MAX_SOURCE_CHARS = 1_000_000  # Largest markup document accepted by /api/render
MAX_DEPTH_LIMIT = 128  # Highest max_depth a render request may ask for
CACHE_CONTROL = "no-cache"
