"""Parser for accessor method names.

An accessor name is one of the verbs ``get``, ``set``, ``has`` or ``unset``
followed by a CamelCase suffix of at least two characters. The suffix names
a field in its underscored form:

    getCreationDate   -> FieldAccessor("get", "creation_date")
    setHTTPServer     -> FieldAccessor("set", "http_server")
    unsetField2Name   -> FieldAccessor("unset", "field2_name")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import ply.yacc as yacc

from data_structures.accessors.accessor_lexer import ACCESSOR_VERBS, AccessorLexer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldAccessor:
    """A parsed accessor name: the operation and the field it targets."""

    verb: str
    field: str


class AccessorParser:
    """Parser for accessor method names."""

    tokens = AccessorLexer.tokens

    def __init__(self) -> None:
        self.lexer = AccessorLexer()
        self.lexer.build()
        self.parser: yacc.LRParser = None  # type: ignore

    def p_accessor(self, p: yacc.YaccProduction) -> None:
        """accessor : verb word_list"""
        p[0] = FieldAccessor(verb=p[1], field="_".join(word.lower() for word in p[2]))

    def p_verb(self, p: yacc.YaccProduction) -> None:
        """verb : GET
                | SET
                | HAS
                | UNSET"""
        p[0] = p[1]

    def p_word_list_single(self, p: yacc.YaccProduction) -> None:
        """word_list : word"""
        p[0] = [p[1]]

    def p_word_list_multiple(self, p: yacc.YaccProduction) -> None:
        """word_list : word_list word"""
        p[0] = p[1] + [p[2]]

    def p_word(self, p: yacc.YaccProduction) -> None:
        """word : WORD
                | ACRONYM"""
        p[0] = p[1]

    def p_error(self, p: yacc.YaccProduction) -> None:
        if p:
            raise SyntaxError(f"Syntax error at '{p.value}' (position {p.lexpos})")
        else:
            raise SyntaxError("Syntax error at end of input")

    def build(self, **kwargs: Any) -> None:
        """Build the parser."""
        self.parser = yacc.yacc(module=self, **kwargs)

    def parse(self, name: str) -> FieldAccessor:
        """Parse an accessor name.

        Raises:
            SyntaxError: If name does not follow the accessor grammar.
        """
        if self.parser is None:
            # LOWER only exists to reject names like "getter"; silence the
            # unused-token warning
            self.build(debug=False, write_tables=False, errorlog=yacc.NullLogger())

        result = self.parser.parse(name, lexer=self.lexer.lexer)
        if result is None:
            raise SyntaxError(f"Invalid accessor name: '{name}'")
        # Suffix length counts the CamelCase characters, not the inserted underscores
        suffix = result.field.replace("_", "")
        if len(suffix) < 2:
            raise SyntaxError(f"Field suffix of '{name}' must be at least two characters")
        return result


_parser: AccessorParser | None = None


def _shared_parser() -> AccessorParser:
    global _parser
    if _parser is None:
        _parser = AccessorParser()
    return _parser


def parse_accessor(name: str) -> FieldAccessor:
    """Parse an accessor name with a shared parser instance."""
    accessor = _shared_parser().parse(name)
    logger.debug("Resolved accessor %r to %s(%r)", name, accessor.verb, accessor.field)
    return accessor


def underscore(name: str) -> str:
    """Convert a CamelCase or camelCase name to its underscored form.

    Examples: ``FooBar`` and ``fooBar`` give ``foo_bar``, ``HTTPServer``
    gives ``http_server``.

    Raises:
        SyntaxError: If name contains characters other than ASCII letters
            and digits.
    """
    tokens = _shared_parser().lexer.tokenize(name)
    return "_".join(tok.value.lower() for tok in tokens)


def camelize(field: str) -> str:
    """Convert an underscored field name to CamelCase (``foo_bar`` -> ``FooBar``)."""
    return "".join(part[:1].upper() + part[1:] for part in field.split("_") if part)


def accessor_name(verb: str, field: str) -> str:
    """Build the accessor name for a verb and a field (``get``, ``foo_bar`` -> ``getFooBar``)."""
    if verb not in ACCESSOR_VERBS:
        raise ValueError(f"Unknown accessor verb '{verb}', expected one of {', '.join(ACCESSOR_VERBS)}")
    return verb + camelize(field)
