"""Pydantic schema for the sync status YAML document."""

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

StatusMap: TypeAlias = dict[str, bool]
"""Mapping of distro name to whether that distro is in a sync hold."""


class SyncStatusModel(BaseModel):
    """Pydantic model for a single distro entry in the sync status document."""

    model_config = ConfigDict(frozen=True, strict=True)

    distro: str
    in_sync_hold: bool
