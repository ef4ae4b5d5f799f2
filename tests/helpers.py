"""Filesystem helpers shared by nerakit tests."""

from __future__ import annotations

import json
from pathlib import Path


def write_manifest(root: Path, payload: object) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
