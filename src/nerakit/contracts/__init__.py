"""Public contracts for nerakit."""

from nerakit.contracts.exceptions import (
    ConfigError,
    ManifestError,
    MissingSourceError,
    NeraKitError,
    NotAProjectError,
    ParseError,
    PublishError,
    PublishRequestError,
)
from nerakit.contracts.manifest import PackageManifest
from nerakit.contracts.publish import (
    DEFAULT_EXPECTED_NAME,
    NERA_NAME_PREFIX,
    TEMPLATE_SUFFIX,
    VENDOR_DIR,
    PublishRequest,
    PublishResult,
)

__all__ = [
    "DEFAULT_EXPECTED_NAME",
    "NERA_NAME_PREFIX",
    "TEMPLATE_SUFFIX",
    "VENDOR_DIR",
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
]
