"""Pure functions backing Collection.

These are stateless helpers: source materialization, selector resolution,
strict equality and the duplicate-offset strategies.
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from urlparts.core.collection.models import (
    DuplicateOffsetError,
    DuplicateOffsetHandling,
    InvalidArgumentError,
    OffsetList,
    Predicate,
    Selector,
    check_offset,
)
from urlparts.core.types import Offset

# Warnings are attributed to the first frame outside this package
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))) + os.sep


def identity_offset(offset: Offset) -> Offset:
    """Default offset validator: accept the offset unchanged."""
    return offset


def strictly_equal(a: Any, b: Any) -> bool:
    """Check equality without cross-type coercion.

    `1`, `1.0`, `True` and `"1"` are all distinct under this comparison.
    Containers are compared element by element with the same rule: sequences
    in order, mappings by their ordered items.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, Mapping):
        return len(a) == len(b) and all(
            strictly_equal(key_a, key_b) and strictly_equal(value_a, value_b)
            for (key_a, value_a), (key_b, value_b) in zip(a.items(), b.items())
        )
    if isinstance(a, Sequence) and not isinstance(a, (str, bytes, bytearray)):
        return len(a) == len(b) and all(strictly_equal(x, y) for x, y in zip(a, b))
    return bool(a == b)


# Duplicate offset strategies


def duplicate_keep_last(data: dict[Offset, Any], offset: Offset, value: Any) -> None:
    """Overwrite the earlier value with the later one."""
    data[offset] = value


def duplicate_warn(data: dict[Offset, Any], offset: Offset, value: Any) -> None:
    """Overwrite the earlier value and warn about it."""
    warnings.warn(
        f"Source data repeats offset {offset!r}. Only the last one will be kept.",
        stacklevel=2,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )
    data[offset] = value


def duplicate_error(data: dict[Offset, Any], offset: Offset, value: Any) -> None:
    """Refuse repeated offsets.

    Raises:
        DuplicateOffsetError: Always.
    """
    raise DuplicateOffsetError(f"Source data repeats offset {offset!r}")


def validate_source(
    data: Mapping[Offset, Any] | Iterable[tuple[Offset, Any]],
    on_duplicate: DuplicateOffsetHandling = DuplicateOffsetHandling.WARN,
) -> dict[Offset, Any]:
    """Materialize raw collection data into an ordered dict.

    Accepts:
    - Mapping: copied in its own iteration order
    - Iterable of (offset, value) pairs, including another Collection.
      Each pair must be a non-string Sequence; mappings and sets are rejected.

    Args:
        data: Raw data to materialize.
        on_duplicate: What to do when a pair repeats an offset.

    Returns:
        New dict owned by the caller.

    Raises:
        InvalidArgumentError: If data is neither form, an item is not a pair,
            or an offset is not int/str.
    """
    if isinstance(data, Mapping):
        return {check_offset(offset): value for offset, value in data.items()}

    if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Iterable):
        raise InvalidArgumentError(
            f"Data must be a mapping or an iterable of (offset, value) pairs, got {type(data).__name__}"
        )

    store_duplicate = on_duplicate.get_strategy()
    result: dict[Offset, Any] = {}
    for item in data:
        if isinstance(item, (str, bytes, bytearray)) or not isinstance(item, Sequence):
            raise InvalidArgumentError(f"Expected (offset, value) pair, got {item!r}")
        pair = tuple(item)
        if len(pair) != 2:
            raise InvalidArgumentError(f"Expected (offset, value) pair, got {item!r}")
        offset, value = pair
        offset = check_offset(offset)
        if offset in result:
            store_duplicate(result, offset, value)
        else:
            result[offset] = value
    return result


def resolve_offsets(offsets: list[Offset], selector: Selector) -> tuple[Offset, ...]:
    """Resolve a selector against the current offsets.

    Args:
        offsets: Offsets of the collection, in storage order.
        selector: Predicate to test each offset, or an explicit OffsetList.

    Returns:
        Offsets to remove. An OffsetList is returned as given, so it may name
        offsets that are not present.

    Raises:
        InvalidArgumentError: If selector is not a Predicate or OffsetList.
    """
    if isinstance(selector, Predicate):
        return tuple(offset for offset in offsets if selector.test(offset))
    if isinstance(selector, OffsetList):
        return selector.offsets
    raise InvalidArgumentError(
        f"Selector must be a Predicate or an OffsetList, got {type(selector).__name__}"
    )
