"""Async file helpers that offload blocking I/O to a thread pool."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    """Create a directory asynchronously using a thread pool.

    Args:
        path: Path to the directory to create.
        parents: If True, create parent directories as needed.
        exist_ok: If True, don't raise an error if directory exists.
    """
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)


async def remove_tree_async(path: Path) -> None:
    """Delete a directory tree asynchronously using a thread pool."""
    await asyncio.to_thread(shutil.rmtree, path)


async def copy_tree_async(source: Path, destination: Path) -> None:
    """Copy a directory tree asynchronously, merging into an existing destination."""
    await asyncio.to_thread(shutil.copytree, source, destination, dirs_exist_ok=True)
