"""MCP Server exposing bundled Markdown documentation over stdio."""

import argparse
import asyncio
import logging
import sys
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from . import __version__
from .config import get_docs_root, get_log_level
from .tools.get_detailed_doc import get_detailed_doc
from .tools.get_overview_doc import get_overview_doc
from .tools.response import error_result

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp_documentation_server"


class ToolName(str, Enum):
    """Operations exposed to clients."""

    GET_OVERVIEW_DOC = "getOverviewDocFor"
    GET_DETAILED_DOC = "getDetailedDocFor"


ToolHandler = Callable[[dict[str, Any], Optional[str]], Awaitable[CallToolResult]]


def _string_param(description: str) -> dict:
    return {"type": "string", "minLength": 1, "description": description}


TOOL_DEFINITIONS: dict[ToolName, Tool] = {
    ToolName.GET_OVERVIEW_DOC: Tool(
        name=ToolName.GET_OVERVIEW_DOC.value,
        description="""Get the overview document for a documentation namespace.

Returns the full Markdown text of docs/<name>/overview.md. Start here to
learn what a namespace covers and which detailed documents it offers.""",
        inputSchema={
            "type": "object",
            "properties": {
                "name": _string_param("Documentation namespace (e.g. 'mcp')"),
            },
            "required": ["name"],
        },
    ),
    ToolName.GET_DETAILED_DOC: Tool(
        name=ToolName.GET_DETAILED_DOC.value,
        description="""Get a specific document within a documentation namespace.

Returns the full Markdown text of docs/<project>/<document>.md. If the
document does not exist, the error lists the documents that do.""",
        inputSchema={
            "type": "object",
            "properties": {
                "project": _string_param("Documentation namespace (e.g. 'mcp')"),
                "document": _string_param("Document name without the .md extension (e.g. 'tool')"),
            },
            "required": ["project", "document"],
        },
    ),
}


async def _handle_overview(arguments: dict[str, Any], docs_root: Optional[str]) -> CallToolResult:
    return await get_overview_doc(name=arguments["name"], docs_root=docs_root)


async def _handle_detailed(arguments: dict[str, Any], docs_root: Optional[str]) -> CallToolResult:
    return await get_detailed_doc(
        project=arguments["project"],
        document=arguments["document"],
        docs_root=docs_root,
    )


TOOL_HANDLERS: dict[ToolName, ToolHandler] = {
    ToolName.GET_OVERVIEW_DOC: _handle_overview,
    ToolName.GET_DETAILED_DOC: _handle_detailed,
}


async def dispatch_tool(
    name: str,
    arguments: Optional[dict[str, Any]],
    docs_root: Optional[str] = None,
) -> CallToolResult:
    """Run a tool by name. Failures come back as error results, never as exceptions."""
    try:
        tool = ToolName(name)
    except ValueError:
        return error_result(f"Unknown tool: {name}")

    arguments = arguments or {}
    required = TOOL_DEFINITIONS[tool].inputSchema.get("required", [])
    missing = [param for param in required if param not in arguments]
    if missing:
        return error_result(f"Missing required argument: {', '.join(missing)}")

    try:
        return await TOOL_HANDLERS[tool](arguments, docs_root)
    except Exception as e:
        logger.exception("Tool %s failed", name)
        return error_result(f"Error: {e}")


def create_server(docs_root: Optional[str] = None) -> Server:
    """Build an MCP server serving documents from `docs_root`."""
    root = str(get_docs_root(docs_root))
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [TOOL_DEFINITIONS[tool] for tool in ToolName]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls."""
        return await dispatch_tool(name, arguments, root)

    logger.debug("Serving documentation from %s", root)
    return server


async def run_server(docs_root: Optional[str] = None):
    """Run the MCP server on stdio until the client disconnects."""
    server = create_server(docs_root)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Documentation MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main(argv: Optional[list[str]] = None):
    """Entry point for the MCP server."""
    parser = argparse.ArgumentParser(description="Documentation MCP server (stdio)")
    parser.add_argument("--docs-root", default=None, help="Directory containing documentation namespaces")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = parser.parse_args(argv)

    # stdout carries the protocol, so all logging goes to stderr
    logging.basicConfig(
        level=get_log_level(args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        asyncio.run(run_server(args.docs_root))
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
