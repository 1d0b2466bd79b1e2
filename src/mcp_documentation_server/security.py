"""Path validation for caller-supplied namespace and document names."""

import logging
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)


class PathTraversalError(ValueError):
    """Raised when a requested document would resolve outside the docs root."""


def is_safe_segment(segment: str) -> bool:
    """Check that a name is a single relative path component (no '..', no separators, not absolute)."""
    if not segment or segment in (".", ".."):
        return False
    if PurePath(segment).is_absolute():
        return False
    if "/" in segment or "\\" in segment or "\x00" in segment:
        return False
    return True


def validate_path_traversal(resolved_path: Path, base_path: Path) -> bool:
    """Check that a resolved path is within the base directory (no traversal/symlink escape)."""
    try:
        resolved_path.relative_to(base_path)
        return True
    except ValueError:
        return False


def ensure_within_root(path: Path, root: Path) -> Path:
    """Resolve `path` and raise PathTraversalError if it leaves `root`."""
    resolved = path.resolve()
    if not validate_path_traversal(resolved, root.resolve()):
        logger.warning("Path traversal detected, rejecting: %s", path)
        raise PathTraversalError(f"Invalid document path: {path}")
    return resolved
