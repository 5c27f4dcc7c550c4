"""
Per-type settings for constant label resolution.

Exports:
    - LabelSettings: Frozen Pydantic model holding the accessor prefix and override source.
    - DEFAULT_SETTINGS: The settings used when a class declares none.
    - load_settings: Build LabelSettings from a YAML file (with optional overrides).
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from constlabel.core.enums import OverrideMode
from constlabel.core.errors import LabelConfigError

__all__ = [
    "LabelSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
]


class LabelSettings(BaseModel):
    """Accessor naming and override lookup for one owning class."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    getter_prefix: str = Field("const", description="Accessor names must start with this")
    labels_source: str = Field("constMagicLabels", description="Class attribute holding label overrides")
    override_mode: OverrideMode = Field(OverrideMode.AUTO, description="How labels_source is read")

    @field_validator("getter_prefix", "labels_source")
    @classmethod
    def must_be_identifier(cls, v: str) -> str:
        if not v or not v.isidentifier():
            raise ValueError(f"must be a non-empty Python identifier, got {v!r}")
        return v

    def evolve(self, **changes: Any) -> "LabelSettings":
        """Return a validated copy with ``changes`` applied."""
        try:
            return LabelSettings(**{**self.model_dump(), **changes})
        except ValidationError as e:
            raise LabelConfigError(str(e)) from e


DEFAULT_SETTINGS = LabelSettings()


def load_settings(path: Union[str, Path], overrides: Optional[Dict[str, Any]] = None) -> LabelSettings:
    """
    Load LabelSettings from a YAML file.

    The file may hold the fields at top level or under a ``constlabel:`` key.
    ``overrides`` (e.g. from the CLI) win over file values.

    Raises:
        FileNotFoundError: If the file does not exist.
        LabelConfigError: If the YAML is not a mapping or fails validation.
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with open(config_file, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise LabelConfigError(f"Config file {config_file} must contain a mapping")
    if isinstance(data.get("constlabel"), dict):
        data = data["constlabel"]
    if overrides:
        data = {**data, **{k: v for k, v in overrides.items() if v is not None}}

    try:
        return LabelSettings(**data)
    except ValidationError as e:
        raise LabelConfigError(f"Invalid settings in {config_file}: {e}") from e
