"""Key-addressed collection."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from data_structures.collection import Collection


class IndexedCollection:
    """A collection whose items are read and written by key.

    Owns a Collection for storage. None is never stored: setting a key to
    None removes it, so a missing key and a None item are indistinguishable.

    Supports the subscript protocol::

        c["a"] = 1      # set
        c["a"]          # get, None when missing
        "a" in c        # has
        del c["a"]      # unset
    """

    def __init__(self, items: Any = None) -> None:
        self._collection = Collection()
        self.set_items(items if items is not None else {})

    # Storage delegated to the owned Collection

    def get_items(self) -> dict[Any, Any]:
        return self._collection.get_items()

    def set_items(self, items: Any) -> IndexedCollection:
        """Replace all items. None items are dropped."""
        self._collection.set_items(items)
        self._collection.filter(lambda item: item is not None)
        return self

    def clear(self) -> IndexedCollection:
        self._collection.clear()
        return self

    def is_empty(self) -> bool:
        return self._collection.is_empty()

    def get_length(self) -> int:
        return self._collection.get_length()

    def map(self, callback: Callable[[Any], Any]) -> dict[Any, Any]:
        return self._collection.map(callback)

    def filter(self, predicate: Callable[[Any], Any]) -> IndexedCollection:
        self._collection.filter(predicate)
        return self

    # Keyed access

    def has(self, key: Any) -> bool:
        """Check whether an item is stored under key."""
        return self._collection.contains_key(key)

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the item stored under key, or default if there is none."""
        return self._collection.get_item(key, default)

    def set(self, key: Any, item: Any) -> IndexedCollection:
        """Store item under key, adding the key if it is new.

        A None item removes the key instead.
        """
        if item is None:
            return self.unset(key)
        self._collection.put_item(key, item)
        return self

    def unset(self, key: Any) -> IndexedCollection:
        """Remove the item stored under key. Missing keys are ignored."""
        self._collection.remove_item(key)
        return self

    def get_keys(self) -> list[Any]:
        return self._collection.get_keys()

    def search(self, item: Any, strict: bool = False) -> Any:
        """Return the first key whose item matches, or None.

        Args:
            item: The item to look for.
            strict: If True, the stored item must also have exactly the
                same type as item (so 1, 1.0 and True no longer match).
        """
        for key, candidate in self._collection:
            if strict and type(candidate) is not type(item):
                continue
            if candidate == item:
                return key
        return None

    def __len__(self) -> int:
        return len(self._collection)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self._collection)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, item: Any) -> None:
        self.set(key, item)

    def __delitem__(self, key: Any) -> None:
        self.unset(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collection.get_items()!r})"
