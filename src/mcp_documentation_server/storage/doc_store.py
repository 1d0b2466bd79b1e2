"""Document storage: reads Markdown files from the docs root."""

import asyncio
import errno
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from ..config import get_docs_root
from ..paths import resolve_detail_path, resolve_overview_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """A document that was read successfully."""
    text: str


@dataclass(frozen=True)
class NotFound:
    """A document that could not be read.

    `available_siblings` is None when no directory listing could be produced,
    which is different from a listing of an empty directory.
    """
    message: str
    available_siblings: Optional[list[str]] = None


DocumentResult = Union[Found, NotFound]


class DocStore:
    """Reads documents from `<docs root>/<namespace>/<document>.md`."""

    def __init__(self, docs_root: Optional[str] = None):
        self.root = get_docs_root(docs_root)

    def overview_path(self, name: str) -> Path:
        return resolve_overview_path(name, str(self.root))

    def detail_path(self, project: str, document: str) -> Path:
        return resolve_detail_path(project, document, str(self.root))

    # Async variants resolve paths in a worker thread

    @classmethod
    async def open(cls, docs_root: Optional[str] = None) -> "DocStore":
        return await asyncio.to_thread(cls, docs_root)

    async def locate_overview(self, name: str) -> Path:
        return await asyncio.to_thread(self.overview_path, name)

    async def locate_detail(self, project: str, document: str) -> Path:
        return await asyncio.to_thread(self.detail_path, project, document)

    async def read_document(self, path: Path, siblings_dir: Optional[Path] = None) -> DocumentResult:
        """
        Read a document as UTF-8 text.

        Args:
            path: Resolved path of the Markdown file
            siblings_dir: Directory to list when the read fails, to help the caller
                pick a valid document name

        Returns:
            Found with the exact file contents, or NotFound with the error message
        """
        logger.debug("Attempting to read file at: %s", path)
        try:
            if not await aiofiles.os.path.isfile(path):
                raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
            # newline="" keeps line endings exactly as stored
            async with aiofiles.open(path, mode="r", encoding="utf-8", newline="") as f:
                text = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            message = str(e)
            logger.warning("Error reading doc %s: %s", path, message)
            siblings = None
            if siblings_dir is not None:
                siblings = await self.list_directory(siblings_dir)
            return NotFound(message=message, available_siblings=siblings)

        logger.debug("Successfully read %s with %d characters", path, len(text))
        return Found(text=text)

    async def list_directory(self, directory: Path) -> Optional[list[str]]:
        """List entry names in a directory, or None if it cannot be listed."""
        try:
            entries = await aiofiles.os.listdir(directory)
        except OSError as e:
            logger.debug("Error listing directory %s: %s", directory, e)
            return None
        entries.sort()
        logger.info("Available documents in %s: %s", directory, entries)
        return entries

    async def list_namespaces(self) -> Optional[list[str]]:
        """List the namespace directories under the docs root, skipping plain files."""
        entries = await self.list_directory(self.root)
        if entries is None:
            return None
        return [entry for entry in entries if await aiofiles.os.path.isdir(self.root / entry)]
