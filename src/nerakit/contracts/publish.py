"""Template publishing contracts."""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nerakit.contracts.exceptions import MissingSourceError

DEFAULT_EXPECTED_NAME = "dummy"
NERA_NAME_PREFIX = "nera"
VENDOR_DIR = Path("views") / "vendor"
TEMPLATE_SUFFIX = ".pug"


class PublishRequest(BaseModel):
    """A single request to publish plugin templates into a host project.

    ``project_root`` defaults to the current working directory at the time the
    request is executed, not when it is built. Template names are relative to
    ``source_dir`` and must stay inside the plugin's vendor directory.
    """

    model_config = ConfigDict(frozen=True)

    plugin_name: str = Field(min_length=1)
    source_dir: Path
    template_files: tuple[str, ...] = Field(min_length=1)
    expected_name: str = DEFAULT_EXPECTED_NAME
    project_root: Path | None = None

    @field_validator("template_files")
    @classmethod
    def _names_stay_in_vendor_dir(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for name in value:
            path = PurePath(name)
            if not name or path.is_absolute() or ".." in path.parts:
                raise ValueError(f"template name must be a relative path inside the source directory: {name!r}")
        return value


class PublishResult(BaseModel):
    destination: Path
    copied: list[Path] = Field(default_factory=list)
    missing: list[Path] = Field(default_factory=list)
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return not self.missing

    def raise_for_missing(self) -> None:
        if self.missing:
            joined = ", ".join(str(path) for path in self.missing)
            raise MissingSourceError(f"source templates not found: {joined}", paths=tuple(self.missing))
