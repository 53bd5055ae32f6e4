"""Shared pytest fixtures for acl-mcp-server test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_SPEC = "# ACL Specification\n## 1. Introduction\nAgent Communication Language (ACL).\n"


@pytest.fixture(autouse=True)
def clear_spec_dir(monkeypatch):
    """Keep a developer's ACL_SPEC_DIR from leaking into tests."""
    monkeypatch.delenv("ACL_SPEC_DIR", raising=False)


@pytest.fixture
def spec_tree(tmp_path) -> Path:
    """Directory tree with ACL.md two levels above the returned start directory.

    Layout::

        tmp_path/project/ACL.md
        tmp_path/project/dist/lib/      <- returned
    """
    project = tmp_path / "project"
    start = project / "dist" / "lib"
    start.mkdir(parents=True)
    (project / "ACL.md").write_text(SAMPLE_SPEC, encoding="utf-8")
    return start
