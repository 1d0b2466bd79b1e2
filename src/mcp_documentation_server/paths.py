"""Map documentation requests onto files under the docs root."""

from pathlib import Path
from typing import Optional

from .config import get_docs_root
from .security import PathTraversalError, ensure_within_root, is_safe_segment

OVERVIEW_FILENAME = "overview.md"
DOC_SUFFIX = ".md"


def _check_segment(segment: str) -> None:
    if not is_safe_segment(segment):
        raise PathTraversalError(f"Invalid path segment: {segment!r}")


def resolve_overview_path(name: str, docs_root: Optional[str] = None) -> Path:
    """Return `<docs root>/<name>/overview.md`."""
    root = get_docs_root(docs_root)
    _check_segment(name)
    return ensure_within_root(root / name / OVERVIEW_FILENAME, root)


def resolve_detail_path(project: str, document: str, docs_root: Optional[str] = None) -> Path:
    """Return `<docs root>/<project>/<document>.md`."""
    root = get_docs_root(docs_root)
    _check_segment(project)
    _check_segment(document)
    return ensure_within_root(root / project / f"{document}{DOC_SUFFIX}", root)
