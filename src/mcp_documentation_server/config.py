"""Runtime configuration read from the environment."""

import logging
import os
from pathlib import Path
from typing import Optional

# Directory holding one sub-directory per documentation namespace
PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_DOCS_ROOT = PACKAGE_ROOT / "docs"

DOCS_ROOT_ENV = "MCP_DOCS_ROOT"
LOG_LEVEL_ENV = "MCP_DOCS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def get_docs_root(docs_root: Optional[str] = None) -> Path:
    """Resolve the documentation root: explicit argument, then MCP_DOCS_ROOT, then the bundled docs."""
    value = docs_root or os.environ.get(DOCS_ROOT_ENV)
    if value:
        return Path(value).expanduser().resolve()
    return DEFAULT_DOCS_ROOT


def get_log_level(log_level: Optional[str] = None) -> int:
    """Map a level name (argument or MCP_DOCS_LOG_LEVEL) to a logging level, falling back to INFO."""
    name = (log_level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
