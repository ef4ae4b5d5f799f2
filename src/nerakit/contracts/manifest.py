"""Host project manifest contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PackageManifest(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
