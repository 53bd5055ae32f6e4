"""Upward directory search for the ACL specification file.

Starting from a directory, each ancestor is checked in turn and the nearest
match wins. Only file existence is checked; contents are never read here.
"""

from __future__ import annotations

import os
from pathlib import Path

import aiofiles.os

from acl_mcp_server.errors import DocumentNotFoundError

ACL_FILENAME = "ACL.md"


async def find_up(filename: str, start: str | os.PathLike[str]) -> Path | None:
    """Return the absolute path of *filename* in *start* or its nearest ancestor.

    Returns None once the filesystem root has been checked without a match.
    """
    directory = Path(os.path.abspath(start))
    while True:
        candidate = directory / filename
        if await aiofiles.os.path.isfile(candidate):
            return candidate
        if directory.parent == directory:
            return None
        directory = directory.parent


async def resolve(start: str | os.PathLike[str], filename: str = ACL_FILENAME) -> Path:
    """Locate *filename* above *start*, raising DocumentNotFoundError if absent."""
    path = await find_up(filename, start)
    if path is None:
        raise DocumentNotFoundError(filename, Path(os.path.abspath(start)))
    return path
