"""Hook protocols connecting a Collection to its concrete owning type.

A concrete component (query parameters, path segments, ...) plugs into
Collection through two callables instead of subclass overrides.

Usage:
    def fold_header(offset):
        if not isinstance(offset, str):
            raise InvalidArgumentError(f"Header names are strings, got {offset!r}")
        return offset.lower()

    headers = Collection(raw, offset_validator=fold_header)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from urlparts.core.types import Offset

if TYPE_CHECKING:
    from urlparts.core.collection.core import Collection


class InstanceFactory(Protocol):
    """Builds a fully validated concrete instance from ordered raw data.

    Called by `without()` and `filter()` so that every derived instance
    re-runs the concrete type's invariants.
    """

    def __call__(self, data: dict[Offset, Any]) -> Collection[Any]:
        """Construct a new instance from an ordered offset -> value dict."""
        ...


class OffsetValidator(Protocol):
    """Normalizes an offset before lookup or removal.

    Must be pure and deterministic. Rejection is signalled by raising;
    the exception reaches the caller unchanged.
    """

    def __call__(self, offset: Offset) -> Offset:
        """Return the usable key for offset."""
        ...
