"""Exception hierarchy for nerakit."""

from __future__ import annotations

from pathlib import Path


class NeraKitError(Exception):
    """Base exception for all nerakit errors."""


class ParseError(NeraKitError):
    """Malformed YAML or JSON input."""


class ConfigError(ParseError):
    """YAML config file could not be read or decoded."""


class ManifestError(ParseError):
    """Project ``package.json`` could not be read or validated."""


class NotAProjectError(NeraKitError):
    """Directory is not a recognised Nera host project."""


class MissingSourceError(NeraKitError):
    """One or more requested template sources do not exist."""

    def __init__(self, message: str, *, paths: tuple[Path, ...] = ()) -> None:
        super().__init__(message)
        self.paths = paths


class PublishError(NeraKitError):
    """Filesystem failure while creating the vendor directory or copying templates."""


class PublishRequestError(NeraKitError, ValueError):
    """Publish arguments are invalid."""
