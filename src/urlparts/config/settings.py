"""Configuration settings using Pydantic Settings.

Usage:
    from urlparts.config import CollectionSettings

    # Load from environment variables (URLPARTS_*)
    settings = CollectionSettings()

    # Or override with explicit values
    settings = CollectionSettings(duplicate_offsets="last_wins")
"""

from __future__ import annotations

from typing import Literal

from urlparts.core.collection.models import DuplicateOffsetHandling

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install urlparts[config]"
    ) from e


class CollectionSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for building collections from raw data.

    Attributes:
        duplicate_offsets: How repeated offsets in pair data are handled
            (last_wins, warn, error).

    Environment Variables:
        URLPARTS_DUPLICATE_OFFSETS
    """

    model_config = SettingsConfigDict(
        env_prefix="URLPARTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    duplicate_offsets: Literal["last_wins", "warn", "error"] = "warn"

    def duplicate_handling(self) -> DuplicateOffsetHandling:
        """Map the configured name onto DuplicateOffsetHandling."""
        return DuplicateOffsetHandling[self.duplicate_offsets.upper()]
