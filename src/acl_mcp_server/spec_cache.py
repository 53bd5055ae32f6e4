"""Process-lifetime cache for the ACL specification document.

The document is located with an upward search starting from the package's
installation directory (not the working directory, which is whatever the
host process chose), read once, and kept for the rest of the process.

Concurrent first callers share a single in-flight load. Failed loads are not
remembered: the slot stays empty and the next call tries again.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

import aiofiles

from acl_mcp_server import locator
from acl_mcp_server.errors import DocumentReadError, SpecificationError

log = logging.getLogger("acl-mcp-server")

_PACKAGE_DIR = Path(__file__).resolve().parent


def _default_start_dir() -> Path:
    return Path(os.environ.get("ACL_SPEC_DIR", str(_PACKAGE_DIR)))


async def read_text(path: Path) -> str:
    """Read *path* fully as UTF-8 text, raising DocumentReadError on failure."""
    try:
        async with aiofiles.open(path, encoding="utf-8") as handle:
            return await handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(path, f"{type(exc).__name__}: {exc}") from exc


class SpecificationCache:
    """Set-once holder for the specification text.

    Args:
        start_dir: Directory the upward search begins in. Defaults to
            ``ACL_SPEC_DIR`` or the package directory, evaluated on first load.
        filename: Name of the document to look for.
    """

    def __init__(
        self,
        start_dir: str | os.PathLike[str] | None = None,
        filename: str = locator.ACL_FILENAME,
    ) -> None:
        self._start_dir = Path(start_dir) if start_dir is not None else None
        self._filename = filename
        self._text: str | None = None
        self._pending: asyncio.Task[str] | None = None

    @property
    def loaded(self) -> bool:
        return self._text is not None

    async def get(self) -> str:
        """Return the specification text, loading it on first use.

        Raises:
            DocumentNotFoundError: the file is not in any ancestor directory.
            DocumentReadError: the file exists but cannot be read as text.
        """
        if self._text is not None:
            return self._text
        if self._pending is None:
            self._pending = asyncio.create_task(self._load())
        else:
            log.debug("Joining in-flight load of %s", self._filename)
        return await asyncio.shield(self._pending)

    async def _load(self) -> str:
        start = self._start_dir or _default_start_dir()
        try:
            path = await locator.resolve(start, self._filename)
            text = await read_text(path)
        except SpecificationError as exc:
            log.warning("Could not load %s: %s", self._filename, exc)
            raise
        finally:
            self._pending = None
        self._text = text
        log.info("Loaded %s (%d chars)", path, len(text))
        return text
