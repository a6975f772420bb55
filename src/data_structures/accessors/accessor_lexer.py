"""Lexer for accessor method names and CamelCase words."""

import ply.lex as lex

# Verbs an accessor name may start with
ACCESSOR_VERBS = ("get", "set", "has", "unset")


class AccessorLexer:
    """Lexer splitting names like ``getHTTPServer2Port`` into words."""

    reserved = {verb: verb.upper() for verb in ACCESSOR_VERBS}

    tokens = [
        "LOWER",
        "ACRONYM",
        "WORD",
    ] + list(reserved.values())

    def __init__(self) -> None:
        self.lexer: lex.LexToken = None  # type: ignore

    def t_LOWER(self, t: lex.LexToken) -> lex.LexToken:
        r"[a-z][a-z0-9]*"
        t.type = self.reserved.get(t.value, "LOWER")
        return t

    def t_ACRONYM(self, t: lex.LexToken) -> lex.LexToken:
        r"[A-Z]+[0-9]*(?![a-z])"
        return t

    def t_WORD(self, t: lex.LexToken) -> lex.LexToken:
        r"[A-Z][a-z0-9]*"
        return t

    def t_error(self, t: lex.LexToken) -> None:
        raise SyntaxError(f"Illegal character '{t.value[0]}' at position {t.lexpos}")

    def build(self, **kwargs) -> None:  # type: ignore
        """Build the lexer."""
        self.lexer = lex.lex(module=self, **kwargs)

    def input(self, data: str) -> None:
        """Set the input string to tokenize."""
        self.lexer.input(data)

    def token(self) -> lex.LexToken | None:
        """Return the next token."""
        return self.lexer.token()

    def tokenize(self, data: str) -> list[lex.LexToken]:
        """Tokenize the input and return all tokens."""
        self.input(data)
        tokens = []
        while True:
            tok = self.token()
            if tok is None:
                break
            tokens.append(tok)
        return tokens
