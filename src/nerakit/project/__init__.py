"""Host project validation exports."""

from nerakit.project.validation import MANIFEST_FILENAME, is_valid_project, manifest_path, read_manifest

__all__ = ["MANIFEST_FILENAME", "is_valid_project", "manifest_path", "read_manifest"]
