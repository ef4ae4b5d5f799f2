"""Publishing plugin templates into a host project's vendor directory."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from nerakit.contracts.exceptions import NotAProjectError, PublishError, PublishRequestError
from nerakit.contracts.publish import (
    DEFAULT_EXPECTED_NAME,
    TEMPLATE_SUFFIX,
    VENDOR_DIR,
    PublishRequest,
    PublishResult,
)
from nerakit.project.validation import is_valid_project

logger = logging.getLogger(__name__)


def vendor_dir(plugin_name: str, *, project_root: str | Path | None = None) -> Path:
    return (Path(project_root) if project_root is not None else Path.cwd()) / VENDOR_DIR / plugin_name


def find_templates(source_dir: Path, *, suffix: str = TEMPLATE_SUFFIX) -> list[str]:
    """List template file names in *source_dir* ending in *suffix*, sorted.

    Listing failures (missing directory, not a directory, permissions) raise
    :class:`OSError`.
    """
    return sorted(entry.name for entry in source_dir.iterdir() if entry.name.endswith(suffix) and entry.is_file())


def copy_templates(request: PublishRequest) -> PublishResult:
    """Copy the requested templates into the plugin's vendor directory.

    An existing vendor directory counts as already published and is left
    untouched. Missing sources are logged and collected in
    :attr:`PublishResult.missing` while the remaining files are still copied.

    Raises :class:`NotAProjectError` when the project root is not a Nera project
    and :class:`PublishError` when the filesystem rejects a write.
    """
    if not is_valid_project(request.expected_name, project_root=request.project_root):
        raise NotAProjectError("not a Nera project")

    destination = vendor_dir(request.plugin_name, project_root=request.project_root)
    if destination.exists():
        logger.warning("Templates already exist at %s. Skipping.", destination)
        return PublishResult(destination=destination, skipped=True)

    result = PublishResult(destination=destination)
    try:
        destination.mkdir(parents=True, exist_ok=True)
        for template_file in request.template_files:
            source_path = (request.source_dir / template_file).resolve()
            dest_path = destination / template_file
            logger.debug("Resolved %s -> %s", source_path, dest_path)

            if not source_path.is_file():
                logger.error("Source template not found: %s", source_path)
                result.missing.append(source_path)
                continue

            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source_path, dest_path)
            logger.info("Copied %s to %s", template_file, dest_path)
            result.copied.append(dest_path)
    except OSError as exc:
        raise PublishError(f"could not publish to {destination}: {exc}") from exc

    return result


def _build_request(**fields: Any) -> PublishRequest:
    try:
        return PublishRequest.model_validate(fields)
    except ValidationError as exc:
        raise PublishRequestError(f"invalid publish request: {exc}") from exc


def publish_templates(
    *,
    plugin_name: str,
    source_dir: str | Path,
    template_files: Sequence[str],
    expected_name: str = DEFAULT_EXPECTED_NAME,
    project_root: str | Path | None = None,
) -> bool:
    """Publish *template_files* from *source_dir* to ``views/vendor/<plugin_name>/``.

    Returns ``True`` when every template was copied or when the vendor directory
    already existed. Returns ``False`` when the project root is not a Nera
    project, when any requested template is missing (present ones are still
    copied) or when a filesystem error interrupts the copy. Every ``False`` is
    accompanied by an ERROR log record.

    Raises :class:`PublishRequestError` for invalid arguments before anything is
    written: an empty or bare-string *template_files* (use :func:`publish_template`
    for one file), or a template name that is absolute or contains ``..``.
    """
    request = _build_request(
        plugin_name=plugin_name,
        source_dir=source_dir,
        template_files=template_files,
        expected_name=expected_name,
        project_root=project_root,
    )

    try:
        result = copy_templates(request)
    except NotAProjectError:
        logger.error("Please run this command from the root of your Nera project (where the plugin is installed).")
        return False
    except PublishError as exc:
        logger.error("Failed to copy templates: %s", exc)
        return False

    if result.skipped:
        return True
    if not result.ok:
        logger.error(
            "Published %d of %d templates to %s; %d source templates missing",
            len(result.copied),
            len(request.template_files),
            result.destination,
            len(result.missing),
        )
        return False

    logger.info("Templates copied to: %s", result.destination)
    return True


def publish_template(
    *,
    plugin_name: str,
    source_dir: str | Path,
    template_file: str,
    expected_name: str = DEFAULT_EXPECTED_NAME,
    project_root: str | Path | None = None,
) -> bool:
    """Publish a single template file. See :func:`publish_templates`."""
    return publish_templates(
        plugin_name=plugin_name,
        source_dir=source_dir,
        template_files=[template_file],
        expected_name=expected_name,
        project_root=project_root,
    )


def publish_all_templates(
    *,
    plugin_name: str,
    source_dir: str | Path,
    expected_name: str = DEFAULT_EXPECTED_NAME,
    project_root: str | Path | None = None,
) -> bool:
    """Publish every ``.pug`` file found directly in *source_dir*.

    An empty template set is a successful no-op. An unreadable source directory
    is logged and reported as ``False``.
    """
    try:
        template_files = find_templates(Path(source_dir))
    except OSError as exc:
        logger.error("Error reading source directory: %s", exc)
        return False

    if not template_files:
        logger.warning("No %s template files found to publish.", TEMPLATE_SUFFIX)
        return True

    return publish_templates(
        plugin_name=plugin_name,
        source_dir=source_dir,
        template_files=template_files,
        expected_name=expected_name,
        project_root=project_root,
    )
