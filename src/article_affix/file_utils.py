"""Page I/O helpers that keep blocking file access off the event loop."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Load a generated page in a worker thread.

    Decoding errors surface as ``UnicodeDecodeError`` so the caller can
    report the page as unreadable.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Save rewritten page markup in a worker thread, replacing the old file."""
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
