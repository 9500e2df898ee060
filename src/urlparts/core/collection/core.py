"""Collection: immutable, ordered, offset-keyed storage for URL components.

Usage:
    segments = Collection([(0, "blog"), (1, "2024"), (2, "post")])
    segments.offsets("blog")  # [0]
    shorter = segments.without(OffsetList([1]))
    assert segments.count() == 3  # original untouched

Gotcha: `without()` and `filter()` never touch the receiver. They build a new
instance through the factory hook so the concrete type can re-validate it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from urlparts.core.collection.models import (
    DuplicateOffsetHandling,
    FilterMode,
    InvalidArgumentError,
    Selector,
)
from urlparts.core.collection.operations import (
    identity_offset,
    resolve_offsets,
    strictly_equal,
    validate_source,
)
from urlparts.core.collection.protocol import InstanceFactory, OffsetValidator
from urlparts.core.types import Copy, Offset

if TYPE_CHECKING:
    from urlparts.config import CollectionSettings

T = TypeVar("T")

_MISSING: Any = object()


class Collection(Generic[T]):
    """Ordered offset -> value container with value semantics.

    Concrete components supply two hooks by composition:
    - factory: builds derived instances (defaults to this class with the same hooks)
    - offset_validator: normalizes or rejects offsets (defaults to identity)

    Subclasses may instead override `new_instance()` / `validate_offset()`.
    A subclass whose constructor does not accept this keyword signature must
    override `new_instance()` and cannot use `from_settings()`.

    Args:
        data: Mapping or iterable of (offset, value) pairs.
        factory: Builds new instances from an ordered dict.
        offset_validator: Called on every offset before lookup or removal.
        on_duplicate: Handling of repeated offsets in pair data.
    """

    __slots__ = ("_data", "_factory", "_offset_validator", "_on_duplicate")

    def __init__(
        self,
        data: Mapping[Offset, T] | Iterable[tuple[Offset, T]] = (),
        *,
        factory: InstanceFactory | None = None,
        offset_validator: OffsetValidator | None = None,
        on_duplicate: DuplicateOffsetHandling = DuplicateOffsetHandling.WARN,
    ):
        self._data: Mapping[Offset, T] = MappingProxyType(self.validate_source(data, on_duplicate))
        self._factory = factory
        self._offset_validator: OffsetValidator = offset_validator or identity_offset
        self._on_duplicate = on_duplicate

    @classmethod
    def from_settings(
        cls,
        data: Mapping[Offset, T] | Iterable[tuple[Offset, T]] = (),
        settings: CollectionSettings | None = None,
        *,
        factory: InstanceFactory | None = None,
        offset_validator: OffsetValidator | None = None,
    ) -> Self:
        """Build a collection using CollectionSettings (loaded from env if omitted).

        Requires the `config` extra. Calls `cls` with the keyword signature of
        `Collection.__init__`, so subclasses must keep that signature to use it.
        """
        from urlparts.config import CollectionSettings

        settings = settings if settings is not None else CollectionSettings()
        return cls(
            data,
            factory=factory,
            offset_validator=offset_validator,
            on_duplicate=settings.duplicate_handling(),
        )

    # Hooks

    @staticmethod
    def validate_source(
        data: Mapping[Offset, T] | Iterable[tuple[Offset, T]],
        on_duplicate: DuplicateOffsetHandling = DuplicateOffsetHandling.WARN,
    ) -> dict[Offset, T]:
        """Materialize a mapping or pair iterable into an ordered dict.

        Raises:
            InvalidArgumentError: If data is neither form.
        """
        return validate_source(data, on_duplicate)

    def validate_offset(self, offset: Offset) -> Offset:
        """Normalize offset before any lookup or removal.

        Exceptions raised by the offset validator propagate unchanged.
        """
        return self._offset_validator(offset)

    def new_instance(self, data: dict[Offset, T]) -> Collection[T]:
        """Build a derived instance of the concrete type from ordered data.

        Without a factory this calls `type(self)` with the keyword signature of
        `Collection.__init__`; subclasses with another constructor override it.
        """
        if self._factory is not None:
            return self._factory(data)
        return type(self)(
            data,
            offset_validator=self._offset_validator,
            on_duplicate=self._on_duplicate,
        )

    # Reading

    def count(self) -> int:
        """Number of entries."""
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def iterate(self) -> Iterator[tuple[Offset, T]]:
        """Lazily yield (offset, value) pairs in storage order.

        Each call starts a fresh iteration from the first entry.
        """
        return iter(self._data.items())

    def __iter__(self) -> Iterator[tuple[Offset, T]]:
        return self.iterate()

    def to_mapping(self) -> Copy[dict[Offset, T]]:
        """Snapshot of the entries as a new dict."""
        return dict(self._data)

    def has_offset(self, offset: Offset) -> bool:
        """Check if the validated offset is present."""
        return self.validate_offset(offset) in self._data

    def __contains__(self, offset: Offset) -> bool:
        return self.has_offset(offset)

    def get(self, offset: Offset, default: Any = None) -> T | Any:
        """Value at the validated offset, or default if absent."""
        return self._data.get(self.validate_offset(offset), default)

    def offsets(self, value: Any = _MISSING) -> list[Offset]:
        """Offsets in storage order.

        Args:
            value: If given, only offsets whose value strictly equals it
                (same type and ==, element-wise for containers) are returned.

        Returns:
            New list of offsets.
        """
        if value is _MISSING:
            return list(self._data)
        return [offset for offset, item in self._data.items() if strictly_equal(item, value)]

    # Deriving

    def without(self, selector: Selector) -> Collection[T]:
        """New collection without the selected offsets.

        Every resolved offset goes through `validate_offset()` before removal.
        Offsets that are absent are ignored. Remaining entries keep their order.

        Args:
            selector: Predicate over offsets, or an explicit OffsetList.

        Returns:
            New instance built via `new_instance()`.

        Raises:
            InvalidArgumentError: If selector is not a Predicate or OffsetList.
        """
        removed = {self.validate_offset(offset) for offset in resolve_offsets(list(self._data), selector)}
        return self.new_instance(
            {offset: value for offset, value in self._data.items() if offset not in removed}
        )

    def filter(
        self,
        predicate: Callable[[Any], bool],
        mode: FilterMode = FilterMode.BY_VALUE,
    ) -> Collection[T]:
        """New collection keeping the entries that satisfy predicate.

        BY_VALUE passes each value to predicate. BY_KEY passes each offset
        only; the value is not available to a key predicate.

        Raises:
            InvalidArgumentError: If mode is not a FilterMode or predicate
                is not callable.
        """
        if not isinstance(mode, FilterMode):
            raise InvalidArgumentError(f"Unknown filter mode {mode!r}, use FilterMode.BY_VALUE or BY_KEY")
        if not callable(predicate):
            raise InvalidArgumentError(f"Filter predicate must be callable, got {type(predicate).__name__}")

        if mode is FilterMode.BY_KEY:
            kept = {offset: value for offset, value in self._data.items() if predicate(offset)}
        else:
            kept = {offset: value for offset, value in self._data.items() if predicate(value)}
        return self.new_instance(kept)

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return list(self._data.items()) == list(other._data.items())  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"
