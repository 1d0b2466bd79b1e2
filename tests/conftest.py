"""Shared test fixtures for documentation server tests."""

import pytest


@pytest.fixture
def docs_root(tmp_path):
    """Create a docs tree with one namespace holding an overview and a tool document."""
    root = tmp_path / "docs"
    sample = root / "sample"
    sample.mkdir(parents=True)
    (sample / "overview.md").write_text("Hello", encoding="utf-8")
    (sample / "tool.md").write_text("# Tools\n\nCall them.\n", encoding="utf-8")

    other = root / "other"
    other.mkdir()
    (other / "overview.md").write_text("# Other\n", encoding="utf-8")
    return root


@pytest.fixture
def only_tool_docs_root(tmp_path):
    """Create a docs tree where `sample/` contains only tool.md."""
    root = tmp_path / "docs"
    sample = root / "sample"
    sample.mkdir(parents=True)
    (sample / "tool.md").write_text("# Tools\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """Keep the caller's environment from redirecting the docs root."""
    monkeypatch.delenv("MCP_DOCS_ROOT", raising=False)
    monkeypatch.delenv("MCP_DOCS_LOG_LEVEL", raising=False)
