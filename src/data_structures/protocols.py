"""Capability interfaces for the container layers.

Each layer owns the one below it instead of inheriting from it:

- SizedContainer: bulk storage, counting and (key, value) iteration
- KeyedContainer: key-addressed has/get/set/unset on top of that
- SequenceContainer: dense 0-based positions with stack operations

Usage:
    from data_structures.protocols import SizedContainer

    def merge(source: SizedContainer) -> None:
        for key, item in source:
            ...
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Protocol, runtime_checkable


@runtime_checkable
class SizedContainer(Protocol):
    """Protocol for a sized, iterable container of keyed items."""

    def get_items(self) -> dict[Any, Any]:
        """Return a copy of the stored key -> item mapping."""
        ...

    def get_length(self) -> int:
        """Return the number of stored items."""
        ...

    def is_empty(self) -> bool:
        """Check whether no items are stored."""
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        ...


@runtime_checkable
class KeyedContainer(SizedContainer, Protocol):
    """Protocol for key-addressed access."""

    def has(self, key: Any) -> bool:
        """Check whether an item is stored under key."""
        ...

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the item stored under key, or default."""
        ...

    def set(self, key: Any, item: Any) -> KeyedContainer:
        """Store item under key. A None item removes the key."""
        ...

    def unset(self, key: Any) -> KeyedContainer:
        """Remove the item stored under key, if any."""
        ...

    def get_keys(self) -> list[Any]:
        """Return all keys in storage order."""
        ...


@runtime_checkable
class SequenceContainer(KeyedContainer, Protocol):
    """Protocol for a dense sequence addressed by positions 0..n-1."""

    def push(self, *items: Any) -> SequenceContainer:
        """Append items to the end."""
        ...

    def pop(self) -> Any:
        """Remove and return the last item."""
        ...

    def unshift(self, *items: Any) -> SequenceContainer:
        """Prepend items as one block."""
        ...

    def shift(self) -> Any:
        """Remove and return the first item."""
        ...

    def sort(self, comparator: Callable[[Any, Any], int]) -> SequenceContainer:
        """Reorder items by a three-way comparator."""
        ...
