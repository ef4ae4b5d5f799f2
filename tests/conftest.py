"""Shared test fixtures for nerakit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import write_manifest


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A host project whose manifest names the ``dummy`` sentinel."""
    root = tmp_path / "site"
    root.mkdir()
    write_manifest(root, {"name": "dummy"})
    return root


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """A plugin views directory holding two templates."""
    source = tmp_path / "plugin" / "views"
    source.mkdir(parents=True)
    (source / "template.pug").write_text("div Template content", encoding="utf-8")
    (source / "nested.pug").write_text("div Nested template", encoding="utf-8")
    return source
