"""MCP tool implementations."""

from .get_overview_doc import get_overview_doc
from .get_detailed_doc import get_detailed_doc

__all__ = ["get_overview_doc", "get_detailed_doc"]
