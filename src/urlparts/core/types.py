"""Core type definitions for urlparts."""

type Offset = int | str
"""Key identifying one entry: a positional index or a name, depending on the component."""

type Copy[T] = T
"""Type alias indicating a value is a fresh container that won't write back.

When you see `Copy[T]` in a return type, the returned container is a new object.
Mutating it does NOT affect the collection it came from. To change a collection,
derive a new one via `without()` or `filter()`.
"""
