"""Data Structures - In-memory collections, ordered sequences and records."""

from data_structures.accessors import FieldAccessor, accessor_name, camelize, parse_accessor, underscore
from data_structures.collection import Collection
from data_structures.indexed import IndexedCollection
from data_structures.ordered import OrderedCollection
from data_structures.protocols import KeyedContainer, SequenceContainer, SizedContainer
from data_structures.record import Record

__all__ = [
    # Containers
    "Collection",
    "IndexedCollection",
    "OrderedCollection",
    "Record",
    # Capability interfaces
    "SizedContainer",
    "KeyedContainer",
    "SequenceContainer",
    # Accessor names
    "FieldAccessor",
    "parse_accessor",
    "accessor_name",
    "camelize",
    "underscore",
]

__version__ = "0.1.0"
