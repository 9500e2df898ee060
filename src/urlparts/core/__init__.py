"""Core functionalities: the collection behavior shared by URL components.

Architecture Note:
    core/ contains pure building blocks with no I/O. Collections are immutable
    after construction; every transformation returns a new instance.
    Optional environment-driven configuration lives in config/.
"""

from urlparts.core.collection import (
    Collection,
    DuplicateOffsetError,
    DuplicateOffsetHandling,
    FilterMode,
    InstanceFactory,
    InvalidArgumentError,
    OffsetList,
    OffsetValidator,
    Predicate,
    Selector,
    identity_offset,
    resolve_offsets,
    strictly_equal,
    validate_source,
)
from urlparts.core.types import Copy, Offset

__all__ = [
    # Types
    "Copy",
    "Offset",
    # Collection
    "Collection",
    "FilterMode",
    "Predicate",
    "OffsetList",
    "Selector",
    "DuplicateOffsetHandling",
    "InvalidArgumentError",
    "DuplicateOffsetError",
    "InstanceFactory",
    "OffsetValidator",
    "validate_source",
    "resolve_offsets",
    "strictly_equal",
    "identity_offset",
]
