from __future__ import annotations

import ast
from pathlib import Path

import nerakit

SRC_ROOT = Path(__file__).resolve().parents[1] / "src" / "nerakit"


def _imported_modules(directory: Path) -> set[str]:
    modules: set[str] = set()
    for path in sorted(directory.rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and node.module is not None:
                modules.add(node.module)
            elif isinstance(node, ast.Import):
                modules.update(alias.name for alias in node.names)
    return modules


def test_public_api_exports_operations() -> None:
    for name in ("load_config", "is_valid_project", "publish_templates", "publish_all_templates"):
        assert name in nerakit.__all__
        assert callable(getattr(nerakit, name))


def test_all_exports_resolve() -> None:
    missing = [name for name in nerakit.__all__ if not hasattr(nerakit, name)]
    assert not missing


def test_contracts_do_not_import_operation_layers() -> None:
    modules = _imported_modules(SRC_ROOT / "contracts")
    forbidden = {m for m in modules if m.startswith(("nerakit.config", "nerakit.project", "nerakit.publish"))}
    assert not forbidden, f"contracts import operation layers: {forbidden}"


def test_config_loader_is_independent_of_publishing() -> None:
    modules = _imported_modules(SRC_ROOT / "config")
    forbidden = {m for m in modules if m.startswith(("nerakit.project", "nerakit.publish"))}
    assert not forbidden, f"config imports publishing layers: {forbidden}"
