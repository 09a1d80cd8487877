"""
Lexical analyzer for the monkey language.

This module converts raw source text into a stream of tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, value, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.
    LexError: Raised when an integer literal does not fit in 32 bits.

Features:
    - Skips spaces, tabs, newlines and carriage returns between tokens
    - Maximal-munch recognition of identifiers and integer literals
    - Keyword lookup once an identifier's full run is known
    - Unknown characters become `ILLEGAL` tokens instead of stopping the scan
    - Returns `EOF` forever once the input is exhausted

The stream is read peek-before-consume: a multi-character scan stops in front
of the first character that does not belong to the lexeme, so the next call
starts exactly there and no position has to be wound back.

Example:
    >>> lexer = Lexer(CharacterStream("let five = 5;"))
    >>> lexer.next_token()
    Token(LET, let)
    >>> lexer.next_token()
    Token(IDENT, five)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - LexError
    - tokenize
    - token_hashmap
"""

import logging
from collections.abc import Iterator
from typing import Any

from monkey.monkey_constants import (
    DIGITS,
    IDENT_CHARS,
    INT32_MAX,
    INT32_MIN,
    WHITESPACE,
    token_hashmap,
)

logger = logging.getLogger(__name__)


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Index of the next character to be consumed.
        line (int): Line number of that character (1-indexed).
        column (int): Column number of that character (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            Exception: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise Exception(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead without consuming it, or "" if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def current(self) -> str | None:
        return self.source[self.position] if self.position < len(self.source) else None

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in the monkey language.

    Attributes:
        type (str): The canonical token type (e.g. 'IDENT', 'INT', 'EOF').
        value (str | int): The payload. The offending character for
            'ILLEGAL', the source text for symbols, keywords and identifiers,
            the parsed integer for 'INT'.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str | int, line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


class LexError(SyntaxError):
    """Raised when a digit run cannot be represented as a 32-bit signed integer.

    Attributes:
        literal (str): The digit run as it appeared in the source.
        line (int): Line where the literal starts.
        col (int): Column where the literal starts.
    """

    def __init__(self, literal: str, line: int = 0, col: int = 0):
        super().__init__(
            f"Integer literal {literal} out of 32-bit range at line {line}, col {col}"
        )
        self.literal = literal
        self.line = line
        self.col = col


class Lexer:
    """Lexical analyzer for the monkey language.

    The Lexer pulls characters from a CharacterStream and produces Token
    objects on demand. Iterating over a lexer yields every remaining token up
    to and including `EOF`; a lexer cannot be rewound.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == "EOF":
                return

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def read_while(self, charset: str) -> str:
        """Consumes the maximal run of characters drawn from `charset`.

        Stops in front of the first character outside the set, leaving it as
        the stream's current character.
        """
        text = ""
        while not self.stream.end_of_file() and self.peek() in charset:
            text += self.advance()
        return text

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or an `EOF` token once input is exhausted.

        Raises:
            LexError: If an integer literal does not fit in 32 bits.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token("EOF", "EOF", line, col)

        ch = self.peek()

        # 1. Identifier or keyword
        if ch in IDENT_CHARS:
            ident = self.read_while(IDENT_CHARS)
            if ident in token_hashmap:
                return Token(token_hashmap[ident], ident, line, col)
            return Token("IDENT", ident, line, col)

        # 2. Single-character symbol
        if ch in token_hashmap:
            self.advance()
            return Token(token_hashmap[ch], ch, line, col)

        # 3. Integer literal
        if ch in DIGITS:
            digits = self.read_while(DIGITS)
            value = int(digits)
            if not INT32_MIN <= value <= INT32_MAX:
                raise LexError(digits, line, col)
            return Token("INT", value, line, col)

        # 4. Unknown character
        logger.debug("Illegal character %r at line %d, col %d", ch, line, col)
        return Token("ILLEGAL", self.advance(), line, col)


def tokenize(source: str) -> list[Token]:
    """Drains a fresh lexer over `source` into a list ending with `EOF`."""
    tokens = list(Lexer(CharacterStream(source)))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


__all__ = ["CharacterStream", "LexError", "Lexer", "Token", "token_hashmap", "tokenize"]
