"""Base container: an insertion-ordered keyed mapping of items."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator


def as_mapping(items: Any) -> dict[Any, Any]:
    """Normalize bulk input into a fresh key -> item dict.

    Mappings keep their keys; lists and tuples are keyed by position.

    Raises:
        TypeError: If items is neither a mapping nor a list/tuple.
    """
    if isinstance(items, Mapping):
        return dict(items)
    if isinstance(items, (list, tuple)):
        return dict(enumerate(items))
    raise TypeError(f"Expected a mapping, list or tuple of items, got {type(items).__name__}")


class Collection:
    """Stores zero or more items under arbitrary int or str keys.

    Items keep their insertion order for iteration. Iterating a collection
    yields (key, item) pairs and may be restarted any number of times.
    """

    def __init__(self, items: Any = None) -> None:
        self._items: dict[Any, Any] = {}
        self.set_items(items if items is not None else {})

    def get_items(self) -> dict[Any, Any]:
        """Return a shallow copy of the key -> item mapping."""
        return dict(self._items)

    def set_items(self, items: Any) -> Collection:
        """Replace all items.

        Args:
            items: A mapping, or a list/tuple keyed by position.

        Returns:
            This collection.
        """
        self._items = as_mapping(items)
        return self

    def clear(self) -> Collection:
        """Remove all items."""
        self._items = {}
        return self

    def is_empty(self) -> bool:
        return not self._items

    def get_length(self) -> int:
        return len(self._items)

    # Single-key primitives

    def contains_key(self, key: Any) -> bool:
        return key in self._items

    def get_item(self, key: Any, default: Any = None) -> Any:
        return self._items.get(key, default)

    def put_item(self, key: Any, item: Any) -> Collection:
        """Store item under key, replacing any item already there."""
        self._items[key] = item
        return self

    def remove_item(self, key: Any) -> Collection:
        """Remove the item stored under key. Missing keys are ignored."""
        self._items.pop(key, None)
        return self

    def get_keys(self) -> list[Any]:
        return list(self._items)

    def map(self, callback: Callable[[Any], Any]) -> dict[Any, Any]:
        """Return a new mapping with callback applied to every item.

        The collection itself is not modified; keys are preserved.
        """
        return {key: callback(item) for key, item in self._items.items()}

    def filter(self, predicate: Callable[[Any], Any]) -> Collection:
        """Keep only the items for which predicate is truthy.

        Surviving items keep their original keys.
        """
        return self.set_items({key: item for key, item in self._items.items() if predicate(item)})

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(list(self._items.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
