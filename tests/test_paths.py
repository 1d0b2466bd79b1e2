"""Tests for path resolution and traversal checks."""

import pytest

from mcp_documentation_server.paths import (
    resolve_detail_path,
    resolve_overview_path,
)
from mcp_documentation_server.security import (
    PathTraversalError,
    is_safe_segment,
    validate_path_traversal,
)


class TestResolvePaths:
    def test_overview_path(self, docs_root):
        path = resolve_overview_path("sample", str(docs_root))
        assert path == docs_root.resolve() / "sample" / "overview.md"

    def test_detail_path(self, docs_root):
        path = resolve_detail_path("sample", "tool", str(docs_root))
        assert path == docs_root.resolve() / "sample" / "tool.md"

    def test_missing_namespace_still_resolves(self, docs_root):
        # Existence is checked when reading, not when resolving
        path = resolve_overview_path("nope", str(docs_root))
        assert path == docs_root.resolve() / "nope" / "overview.md"

    def test_env_root(self, docs_root, monkeypatch):
        monkeypatch.setenv("MCP_DOCS_ROOT", str(docs_root))
        assert resolve_overview_path("sample") == docs_root.resolve() / "sample" / "overview.md"

    def test_deterministic(self, docs_root):
        first = resolve_detail_path("sample", "tool", str(docs_root))
        second = resolve_detail_path("sample", "tool", str(docs_root))
        assert first == second


class TestTraversal:
    @pytest.mark.parametrize("name", ["..", "../etc", "/etc", "a/b", ".", ""])
    def test_overview_rejects_unsafe_names(self, docs_root, name):
        with pytest.raises(PathTraversalError):
            resolve_overview_path(name, str(docs_root))

    def test_detail_rejects_unsafe_document(self, docs_root):
        with pytest.raises(PathTraversalError):
            resolve_detail_path("sample", "../../secret", str(docs_root))

    def test_traversal_error_is_value_error(self):
        assert issubclass(PathTraversalError, ValueError)

    def test_symlink_escape_rejected(self, docs_root, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "overview.md").write_text("secret", encoding="utf-8")
        (docs_root / "linked").symlink_to(outside, target_is_directory=True)
        with pytest.raises(PathTraversalError):
            resolve_overview_path("linked", str(docs_root))


class TestSecurityHelpers:
    def test_safe_segments(self):
        assert is_safe_segment("sample") is True
        assert is_safe_segment("my-doc.v2") is True

    def test_unsafe_segments(self):
        assert is_safe_segment("..") is False
        assert is_safe_segment("a\\b") is False
        assert is_safe_segment("/abs") is False

    def test_validate_path_traversal(self, tmp_path):
        assert validate_path_traversal(tmp_path / "a" / "b", tmp_path) is True
        assert validate_path_traversal(tmp_path.parent, tmp_path) is False
