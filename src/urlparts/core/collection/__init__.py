"""Collection functionality: offset-keyed storage, selectors and hooks."""

from urlparts.core.collection.core import Collection
from urlparts.core.collection.models import (
    DuplicateOffsetError,
    DuplicateOffsetHandling,
    FilterMode,
    InvalidArgumentError,
    OffsetList,
    Predicate,
    Selector,
)
from urlparts.core.collection.operations import (
    identity_offset,
    resolve_offsets,
    strictly_equal,
    validate_source,
)
from urlparts.core.collection.protocol import InstanceFactory, OffsetValidator

__all__ = [
    # Core
    "Collection",
    # Models
    "FilterMode",
    "Predicate",
    "OffsetList",
    "Selector",
    "DuplicateOffsetHandling",
    "InvalidArgumentError",
    "DuplicateOffsetError",
    # Protocols
    "InstanceFactory",
    "OffsetValidator",
    # Operations
    "validate_source",
    "resolve_offsets",
    "strictly_equal",
    "identity_offset",
]
