"""Tool to get a namespace's overview document."""

from typing import Optional

from mcp.types import CallToolResult

from ..security import PathTraversalError
from ..storage.doc_store import DocStore, Found
from .response import error_result, text_result


async def get_overview_doc(name: str, docs_root: Optional[str] = None) -> CallToolResult:
    """
    Get the overview.md document of a documentation namespace.

    Args:
        name: Namespace (sub-directory of the docs root)
        docs_root: Custom docs root (defaults to MCP_DOCS_ROOT or the bundled docs)

    Returns:
        Text result with the document contents, or an error result naming the
        namespace and listing what is available
    """
    store = await DocStore.open(docs_root)
    prefix = f'Error: Could not find overview document for "{name}".'

    try:
        path = await store.locate_overview(name)
    except PathTraversalError as e:
        return error_result(f"{prefix} {e}")

    result = await store.read_document(path, siblings_dir=path.parent)
    if isinstance(result, Found):
        return text_result(result.text)

    text = f"{prefix} {result.message}"
    if result.available_siblings is not None:
        text += f"\nAvailable documents: {', '.join(result.available_siblings)}"
    else:
        namespaces = await store.list_namespaces()
        if namespaces:
            text += f"\nAvailable namespaces: {', '.join(namespaces)}"
    return error_result(text)
