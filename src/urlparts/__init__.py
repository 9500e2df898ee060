"""urlparts: immutable offset-keyed collections for URL components.

Usage:
    from urlparts import Collection, FilterMode, OffsetList, Predicate

    params = Collection([("q", "python"), ("page", "2"), ("utm_source", "mail")])

    clean = params.without(Predicate(lambda key: key.startswith("utm_")))
    first_page = params.without(OffsetList(["page"]))
    non_empty = params.filter(lambda value: value != "")
    named = params.filter(lambda key: key in {"q"}, FilterMode.BY_KEY)

    assert params.count() == 3  # params itself never changes
"""

__version__ = "0.1.0"

from urlparts.core import (
    Collection,
    Copy,
    DuplicateOffsetError,
    DuplicateOffsetHandling,
    FilterMode,
    InstanceFactory,
    InvalidArgumentError,
    Offset,
    OffsetList,
    OffsetValidator,
    Predicate,
    Selector,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "Offset",
    "Copy",
    # Collection
    "Collection",
    "FilterMode",
    "Predicate",
    "OffsetList",
    "Selector",
    "DuplicateOffsetHandling",
    # Hooks
    "InstanceFactory",
    "OffsetValidator",
    # Errors
    "InvalidArgumentError",
    "DuplicateOffsetError",
]
