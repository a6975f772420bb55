"""Accessor name grammar for Record field dispatch."""

from data_structures.accessors.accessor_lexer import ACCESSOR_VERBS, AccessorLexer
from data_structures.accessors.accessor_parser import (
    AccessorParser,
    FieldAccessor,
    accessor_name,
    camelize,
    parse_accessor,
    underscore,
)

__all__ = [
    "ACCESSOR_VERBS",
    "AccessorLexer",
    "AccessorParser",
    "FieldAccessor",
    "accessor_name",
    "camelize",
    "parse_accessor",
    "underscore",
]
