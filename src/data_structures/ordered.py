"""Ordered collection of consecutively indexed items."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator

from data_structures.collection import as_mapping
from data_structures.indexed import IndexedCollection
from data_structures.protocols import SizedContainer

logger = logging.getLogger(__name__)


class OrderedCollection:
    """A sequence of items indexed 0..n-1 without gaps.

    Owns an IndexedCollection whose keys are kept dense after every
    mutation: removing an item shifts all following items down by one, and
    bulk input is renumbered in its iteration order. New items may be
    appended or prepended, and the usual stack operations are available.

    Offsets must be ints (bools are rejected with TypeError). Negative
    offsets and lengths raise IndexError wherever a write is requested. A
    rejected call leaves the collection unchanged.

    As with IndexedCollection, None is never stored.
    """

    def __init__(self, items: Any = None) -> None:
        self._indexed = IndexedCollection()
        self.set_items(items if items is not None else [])

    def _values(self) -> list[Any]:
        """Return the items in index order."""
        return [item for _, item in self._indexed]

    def _renumber(self, values: Iterable[Any]) -> OrderedCollection:
        """Store values under 0..n-1 in the given order."""
        self._indexed.set_items([item for item in values if item is not None])
        return self

    @staticmethod
    def _check_offset(offset: Any) -> None:
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"Offset must be an int, got {type(offset).__name__}")

    # Bulk storage

    def get_items(self) -> dict[int, Any]:
        return self._indexed.get_items()

    def set_items(self, items: Any) -> OrderedCollection:
        """Replace all items, discarding the keys of the input.

        Args:
            items: A mapping, or a list/tuple. Values are renumbered 0..n-1
                in iteration order.
        """
        return self._renumber(as_mapping(items).values())

    def clear(self) -> OrderedCollection:
        self._indexed.clear()
        return self

    def is_empty(self) -> bool:
        return self._indexed.is_empty()

    def get_length(self) -> int:
        return self._indexed.get_length()

    def get_keys(self) -> list[int]:
        return self._indexed.get_keys()

    def map(self, callback: Callable[[Any], Any]) -> dict[int, Any]:
        return self._indexed.map(callback)

    def filter(self, predicate: Callable[[Any], Any]) -> OrderedCollection:
        """Keep only the items for which predicate is truthy, then renumber."""
        return self._renumber(item for item in self._values() if predicate(item))

    def search(self, item: Any, strict: bool = False) -> int | None:
        return self._indexed.search(item, strict)

    # Positional access

    def has(self, offset: int) -> bool:
        self._check_offset(offset)
        return self._indexed.has(offset)

    def get(self, offset: int, default: Any = None) -> Any:
        """Return the item at offset, or default when offset is out of range."""
        self._check_offset(offset)
        return self._indexed.get(offset, default)

    def set(self, offset: int, item: Any) -> OrderedCollection:
        """Replace the item at offset.

        If offset is not occupied yet (offset >= length), item is appended to
        the end instead of being placed at offset. A None item removes the
        item at offset.

        Raises:
            TypeError: If offset is not an int.
            IndexError: If offset is negative.
        """
        self._check_offset(offset)
        if offset < 0:
            raise IndexError(f"Only non-negative offsets are allowed, {offset} is negative")

        if item is None:
            return self.unset(offset)

        if self._indexed.has(offset):
            self._indexed.set(offset, item)
            return self

        logger.debug("Offset %d exceeds length %d, appending instead", offset, self.get_length())
        return self.push(item)

    def unset(self, offset: int) -> OrderedCollection:
        """Remove the item at offset and shift all following items down."""
        self._check_offset(offset)
        if not self._indexed.has(offset):
            return self

        values = self._values()
        del values[offset]
        return self._renumber(values)

    def get_first(self) -> Any:
        """Return the first item, or None if the collection is empty."""
        return self._indexed.get(0)

    def get_last(self) -> Any:
        """Return the last item, or None if the collection is empty."""
        return self._indexed.get(self.get_length() - 1)

    # Reshaping

    def truncate(self, length: int) -> OrderedCollection:
        """Keep only the first length items.

        A length beyond the current length leaves the collection as is.

        Raises:
            TypeError: If length is not an int.
            IndexError: If length is negative.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"Length must be an int, got {type(length).__name__}")
        if length < 0:
            raise IndexError(f"Only non-negative lengths are allowed, {length} is negative")

        return self._renumber(self._values()[:length])

    def append(self, source: Any) -> OrderedCollection:
        """Append the items of another container, mapping, list or tuple.

        The source's keys are discarded; its items are added after the
        existing ones in the source's iteration order.

        Raises:
            TypeError: For any other kind of source.
        """
        if isinstance(source, SizedContainer):
            new_items = list(source.get_items().values())
        elif isinstance(source, (Mapping, list, tuple)):
            new_items = list(as_mapping(source).values())
        else:
            raise TypeError(
                f"Expected a collection, mapping, list or tuple to append, got {type(source).__name__}"
            )

        return self.push(*new_items)

    def sort(self, comparator: Callable[[Any, Any], int]) -> OrderedCollection:
        """Sort the items in place with a three-way comparator.

        comparator(a, b) returns a negative number if a sorts before b, zero
        if they are equal and a positive number otherwise. Equal items keep
        their relative order.
        """
        if not callable(comparator):
            raise TypeError(f"Comparator must be callable, got {type(comparator).__name__}")
        return self._renumber(sorted(self._values(), key=cmp_to_key(comparator)))

    # Stack operations

    def push(self, *items: Any) -> OrderedCollection:
        """Append one or more items to the end.

        Existing items keep their offsets; each new item is stored at the
        current length.
        """
        for item in items:
            if item is not None:
                self._indexed.set(self.get_length(), item)
        return self

    def unshift(self, *items: Any) -> OrderedCollection:
        """Prepend one or more items.

        The items are prepended as a whole: unshift(a, b) yields
        [a, b, ...], not [b, a, ...].
        """
        return self._renumber(list(items) + self._values())

    def pop(self) -> Any:
        """Remove and return the last item, or None if the collection is empty."""
        if self.is_empty():
            return None
        last = self.get_length() - 1
        item = self._indexed.get(last)
        self._indexed.unset(last)
        return item

    def shift(self) -> Any:
        """Remove and return the first item, or None if the collection is empty."""
        if self.is_empty():
            return None
        values = self._values()
        self._renumber(values[1:])
        return values[0]

    def __len__(self) -> int:
        return len(self._indexed)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(self._indexed)

    def __contains__(self, offset: int) -> bool:
        return self.has(offset)

    def __getitem__(self, offset: int) -> Any:
        return self.get(offset)

    def __setitem__(self, offset: int, item: Any) -> None:
        self.set(offset, item)

    def __delitem__(self, offset: int) -> None:
        self.unset(offset)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values()!r})"
