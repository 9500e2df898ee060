"""Configuration module using Pydantic Settings.

Provides typed, environment-driven defaults for collection construction.

Usage:
    from urlparts.config import CollectionSettings

    settings = CollectionSettings(duplicate_offsets="error")
    params = Collection.from_settings(pairs, settings)
"""

from urlparts.config.settings import CollectionSettings

__all__ = [
    "CollectionSettings",
]
