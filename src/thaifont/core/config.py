"""Configuration model for the Thai font resolver.

ResolverConfig

`font_files` (`list[str]`)
: File names probed, in order, inside the plugin resource directory before any
  system font is considered.

`system_fonts` (`list[str]`)
: Family names of system-registered fonts probed after the plugin files.

`atlas_padding` (`int`)
: Padding applied to the glyph atlas of the resolved font asset.

`temp_prefix` (`str`)
: Prefix of the temporary files used to stage plugin fonts before loading.

`require_glyph_coverage` (`bool`)
: Reject fonts that do not map the Thai block. Disabled by default: the first
  font the text system accepts wins.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from thaifont.core.exceptions import ConfigurationError
from thaifont.fonts.constants import (
    DEFAULT_ATLAS_PADDING,
    DEFAULT_FONT_FILES,
    DEFAULT_SYSTEM_FONTS,
    DEFAULT_TEMP_PREFIX,
)


CONFIG_ENV = "THAIFONT_CONFIG"


class ResolverConfig(BaseModel):
    """Candidate lists and asset settings used by the plugin."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    font_files: list[str] = Field(default_factory=lambda: list(DEFAULT_FONT_FILES))
    system_fonts: list[str] = Field(default_factory=lambda: list(DEFAULT_SYSTEM_FONTS))
    atlas_padding: int = Field(default=DEFAULT_ATLAS_PADDING, ge=0)
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    require_glyph_coverage: bool = False

    @field_validator("font_files", "system_fonts")
    @classmethod
    def _strip_entries(cls, value: list[str]) -> list[str]:
        return [entry.strip() for entry in value if entry and entry.strip()]

    @field_validator("temp_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned or any(sep in cleaned for sep in ("/", "\\")):
            raise ValueError("temp_prefix must be a non-empty file name fragment")
        return cleaned


def load_config(path: Path | None = None) -> ResolverConfig:
    """Load a ``ResolverConfig`` from YAML, falling back to the defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV)
        path = Path(env_path).expanduser() if env_path else None
    if path is None or not path.exists():
        return ResolverConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to read configuration '{path}'.") from exc

    if data is None:
        return ResolverConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration '{path}' must be a mapping.")
    try:
        return ResolverConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration '{path}': {exc}") from exc


__all__ = ["CONFIG_ENV", "ResolverConfig", "load_config"]
