"""Host project detection from the ``package.json`` manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nerakit.contracts.exceptions import ManifestError, NotAProjectError
from nerakit.contracts.manifest import PackageManifest
from nerakit.contracts.publish import DEFAULT_EXPECTED_NAME, NERA_NAME_PREFIX

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def manifest_path(project_root: str | Path | None = None) -> Path:
    return (Path(project_root) if project_root is not None else Path.cwd()) / MANIFEST_FILENAME


def read_manifest(project_root: str | Path | None = None) -> PackageManifest:
    """Read and validate the manifest of the project at *project_root* (cwd by default).

    Raises :class:`NotAProjectError` when no manifest exists and
    :class:`ManifestError` when it cannot be read, decoded or validated.
    """
    path = manifest_path(project_root)
    if not path.exists():
        raise NotAProjectError(f"no {MANIFEST_FILENAME} found at {path}")

    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
        return PackageManifest.model_validate(payload)
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"failed reading {MANIFEST_FILENAME}: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"invalid JSON in {MANIFEST_FILENAME}: {exc}") from exc
    except ValidationError as exc:
        raise ManifestError(f"invalid {MANIFEST_FILENAME}: {exc}") from exc


def is_valid_project(
    expected_name: str = DEFAULT_EXPECTED_NAME, *, project_root: str | Path | None = None
) -> bool:
    """Return whether *project_root* (cwd by default) is a Nera host project.

    A project qualifies when its manifest name equals *expected_name* or starts
    with ``"nera"``. Broken manifests are logged and reported as ``False``.
    """
    try:
        manifest = read_manifest(project_root)
    except NotAProjectError:
        return False
    except ManifestError as exc:
        logger.error("Error reading %s: %s", MANIFEST_FILENAME, exc)
        return False

    if manifest.name is None:
        return False
    return manifest.name == expected_name or manifest.name.startswith(NERA_NAME_PREFIX)
