"""Tool to get a specific document within a namespace."""

from typing import Optional

from mcp.types import CallToolResult

from ..security import PathTraversalError
from ..storage.doc_store import DocStore, Found
from .response import error_result, text_result


async def get_detailed_doc(
    project: str,
    document: str,
    docs_root: Optional[str] = None,
) -> CallToolResult:
    """
    Get `<document>.md` from a namespace.

    Args:
        project: Namespace (sub-directory of the docs root)
        document: Document name without the .md extension
        docs_root: Custom docs root (defaults to MCP_DOCS_ROOT or the bundled docs)

    Returns:
        Text result with the document contents, or an error result; when the
        namespace exists the error lists its files
    """
    store = await DocStore.open(docs_root)
    missing = f'Error: Could not find project "{project}" or document "{document}.md".'

    try:
        path = await store.locate_detail(project, document)
    except PathTraversalError as e:
        return error_result(f"{missing} {e}")

    result = await store.read_document(path, siblings_dir=path.parent)
    if isinstance(result, Found):
        return text_result(result.text)

    if result.available_siblings is None:
        return error_result(f"{missing} {result.message}")

    return error_result(
        f'Error: Could not find document "{document}.md" for project "{project}".\n'
        f"Available documents: {', '.join(result.available_siblings)}. {result.message}"
    )
