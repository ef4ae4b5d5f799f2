"""Public API surface for nerakit."""

__version__ = "0.1.0"

from nerakit.config import load_config
from nerakit.contracts import (
    ConfigError,
    ManifestError,
    MissingSourceError,
    NeraKitError,
    NotAProjectError,
    PackageManifest,
    ParseError,
    PublishError,
    PublishRequest,
    PublishRequestError,
    PublishResult,
)
from nerakit.project import is_valid_project, read_manifest
from nerakit.publish import (
    copy_templates,
    find_templates,
    publish_all_templates,
    publish_template,
    publish_templates,
    vendor_dir,
)

__all__ = [
    "ConfigError",
    "ManifestError",
    "MissingSourceError",
    "NeraKitError",
    "NotAProjectError",
    "PackageManifest",
    "ParseError",
    "PublishError",
    "PublishRequest",
    "PublishRequestError",
    "PublishResult",
    "__version__",
    "copy_templates",
    "find_templates",
    "is_valid_project",
    "load_config",
    "publish_all_templates",
    "publish_template",
    "publish_templates",
    "read_manifest",
    "vendor_dir",
]
