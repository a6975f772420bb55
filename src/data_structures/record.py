"""Record: named fields over an indexed collection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterator

from data_structures.accessors import FieldAccessor, parse_accessor
from data_structures.indexed import IndexedCollection


class Record:
    """A set of named field values.

    Fields are stored in an owned IndexedCollection keyed by field name and
    can be read and written with get_field()/set_field()/has_field()/
    unset_field(), or with the subscript protocol::

        record["caption"] = "new caption"
        record["caption"]          # None for a missing field
        "caption" in record
        del record["caption"]

    In addition, accessor methods are resolved from their names. A verb
    (get, set, has or unset) followed by the CamelCase form of a field name
    maps to the corresponding field operation on the underscored name::

        record.setCaption("x")       <=> record.set_field("caption", "x")
        record.getCreationDate()     <=> record.get_field("creation_date")
        record.unsetCreationDate()   <=> record.unset_field("creation_date")
        record.hasCreationDate()     <=> record.has_field("creation_date")

    The set accessor passes on its first argument only, or None when called
    without arguments. Any other unknown attribute raises AttributeError.
    """

    def __init__(self, data: Mapping[str, Any] | IndexedCollection | None = None) -> None:
        self._data = IndexedCollection()
        self.set_data(data if data is not None else {})

    def set_data(self, data: Mapping[str, Any] | IndexedCollection) -> Record:
        """Replace the record's data.

        Args:
            data: A mapping of field name to value (copied into a new
                IndexedCollection), or an IndexedCollection used as is.

        Raises:
            TypeError: For any other kind of data.
        """
        if isinstance(data, IndexedCollection):
            self._data = data
        elif isinstance(data, Mapping):
            self._data = IndexedCollection(data)
        else:
            raise TypeError(f"Expected a mapping or IndexedCollection, got {type(data).__name__}")
        return self

    def get_data(self) -> IndexedCollection:
        return self._data

    def get_data_as_dict(self) -> dict[str, Any]:
        """Return the record's fields as a plain dict."""
        return self._data.get_items()

    def get_field(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set_field(self, key: str, value: Any) -> Record:
        """Set a field. A None value removes the field."""
        self._data.set(key, value)
        return self

    def has_field(self, key: str) -> bool:
        return self._data.has(key)

    def unset_field(self, key: str) -> Record:
        self._data.unset(key)
        return self

    def clear(self) -> Record:
        """Remove all fields."""
        self._data.clear()
        return self

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def dispatch(self, method: str, *args: Any) -> Any:
        """Call the accessor method named method with args.

        Raises:
            AttributeError: If method is not a valid accessor name.
        """
        return self._resolve_accessor(method)(*args)

    def _resolve_accessor(self, method: str) -> Callable[..., Any]:
        try:
            accessor = parse_accessor(method)
        except SyntaxError as e:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{method}'") from e
        return self._bind_accessor(accessor)

    def _bind_accessor(self, accessor: FieldAccessor) -> Callable[..., Any]:
        field = accessor.field
        if accessor.verb == "get":
            return lambda *args: self.get_field(field)
        if accessor.verb == "set":
            return lambda *args: self.set_field(field, args[0] if args else None)
        if accessor.verb == "has":
            return lambda *args: self.has_field(field)
        return lambda *args: self.unset_field(field)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached for attributes not found the normal way
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self._resolve_accessor(name)

    def __getitem__(self, key: str) -> Any:
        return self.get_field(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_field(key, value)

    def __delitem__(self, key: str) -> None:
        self.unset_field(key)

    def __contains__(self, key: str) -> bool:
        return self.has_field(key)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Record({self._data.get_items()!r})"
