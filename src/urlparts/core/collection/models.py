"""Collection models: selectors, filter modes and errors.

Usage:
    # Remove explicit offsets
    params.without(OffsetList(["utm_source", "utm_medium"]))

    # Remove offsets matching a predicate
    params.without(Predicate(lambda key: key.startswith("utm_")))

    # Keep entries by value or by key
    params.filter(lambda value: value is not None)
    segments.filter(lambda index: index < 2, FilterMode.BY_KEY)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from urlparts.core.types import Offset


class InvalidArgumentError(ValueError):
    """Raised when a collection operation receives a malformed argument."""

    pass


class DuplicateOffsetError(InvalidArgumentError):
    """Raised when source pairs repeat an offset and handling is ERROR."""

    pass


def check_offset(offset: Any) -> Offset:
    """Accept int or str offsets.

    Raises:
        InvalidArgumentError: For any other type. bool is rejected even though it is an int.
    """
    if isinstance(offset, bool) or not isinstance(offset, (int, str)):
        raise InvalidArgumentError(f"Offsets must be int or str, got {type(offset).__name__}")
    return offset


class FilterMode(Enum):
    """What a `filter()` predicate receives."""

    BY_VALUE = auto()
    """Predicate receives each value; matching entries are kept."""

    BY_KEY = auto()
    """Predicate receives each offset only; matching offsets are kept."""


class DuplicateOffsetHandling(Enum):
    """Strategy for pair sequences that name the same offset more than once."""

    LAST_WINS = auto()  # Keep the last value silently
    WARN = auto()  # Keep the last value, emit a UserWarning
    ERROR = auto()  # Raise DuplicateOffsetError

    def get_strategy(self) -> Callable[[dict[Offset, Any], Offset, Any], None]:
        """Get the function that stores a repeated offset for this handling mode.

        Returns:
            Function called with (data, offset, value) when offset is already in data.
        """
        # Late import to avoid circular dependency
        from urlparts.core.collection import operations

        strategies = {
            DuplicateOffsetHandling.LAST_WINS: operations.duplicate_keep_last,
            DuplicateOffsetHandling.WARN: operations.duplicate_warn,
            DuplicateOffsetHandling.ERROR: operations.duplicate_error,
        }
        return strategies[self]


@dataclass(frozen=True, slots=True)
class Predicate:
    """Select offsets by testing each one with a function."""

    test: Callable[[Offset], bool]

    def __post_init__(self) -> None:
        if not callable(self.test):
            raise InvalidArgumentError(f"Predicate requires a callable, got {type(self.test).__name__}")


@dataclass(frozen=True, slots=True)
class OffsetList:
    """Select an explicit sequence of offsets.

    Immutable: the offsets are checked and copied into a tuple on construction.
    """

    offsets: tuple[Offset, ...]

    def __init__(self, offsets: Sequence[Offset] = ()):
        if isinstance(offsets, (str, bytes)) or not isinstance(offsets, Sequence):
            raise InvalidArgumentError(
                f"OffsetList requires a sequence of offsets, got {type(offsets).__name__}"
            )
        object.__setattr__(self, "offsets", tuple(check_offset(offset) for offset in offsets))

    def __iter__(self) -> Iterator[Offset]:
        return iter(self.offsets)

    def __len__(self) -> int:
        return len(self.offsets)


Selector = Predicate | OffsetList
