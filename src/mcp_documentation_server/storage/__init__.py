"""Read-only access to the documentation tree."""

from .doc_store import DocStore, DocumentResult, Found, NotFound

__all__ = ["DocStore", "DocumentResult", "Found", "NotFound"]
