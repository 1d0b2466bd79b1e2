"""MCP server exposing bundled Markdown documentation."""

__version__ = "1.0.0"
