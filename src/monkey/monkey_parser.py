"""
monkey Expression Parser

Parses a finite token sequence into abstract syntax trees (ASTs).

Grammar
-------
    primary   := INT | IDENT
    additive  := primary ( '+' primary )*

`additive` is the entry production. Each extra `+ primary` wraps the tree
built so far, so `1+2+3` becomes `add(add(1, 2), 3)`. New precedence levels
go in as further chained productions using the same loop, leaving `primary`
untouched.

Parser Behavior
---------------
- `parse()` reads one expression from the cursor, appends it to `result` and
  leaves the cursor right after it. Repeated calls continue from there.
- A trailing `EOF` token is neither required nor consumed by `parse()`.
- A grammar violation restores the cursor to where the call started. In
  strict mode (the default) the `ParseError` is raised; otherwise it is
  recorded in `errors` and `None` is returned.

Entry Points
------------
- `parse()`: Parse one additive expression.
- `parse_program()`: Parse expressions (optionally `;`-separated) up to `EOF`.
- `parse_source()`: Tokenize and parse a source string in one step.

Raises
------
ParseError
    Raised in strict mode when a token other than an operand appears where
    an operand is required, or the tokens run out.
"""

from __future__ import annotations

import logging

from monkey.monkey_ast import ASTNode, add_node, identifier_node, integer_node
from monkey.monkey_constants import operand_tokens
from monkey.monkey_lexer import Token, tokenize

logger = logging.getLogger(__name__)


class ParseError(SyntaxError):
    """Structured grammar violation.

    Attributes:
        expected (tuple[str, ...]): Token types that would have been accepted.
        actual (Token | None): The offending token, or None when the
            sequence ran out.
        position (int): Index of the offending token in the sequence.
    """

    def __init__(
        self, expected: tuple[str, ...], actual: Token | None, position: int
    ) -> None:
        if actual is None:
            found = "end of input"
        else:
            found = f"{actual} at line {actual.line}, col {actual.col}"
        super().__init__(f"Expected one of {expected}, got {found}")
        self.expected = expected
        self.actual = actual
        self.position = position


class Parser:
    """
    Recursive-descent parser over a fixed token sequence.

    Attributes
    ----------
    tokens : list[Token]
        The input token sequence. Never modified.
    position : int
        Index of the next token to read.
    result : list[ASTNode]
        Expressions parsed so far, in order.
    errors : list[ParseError]
        Errors recorded by non-strict parsing.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.result: list[ASTNode] = []
        self.errors: list[ParseError] = []

    def peek(self) -> Token | None:
        """Returns the token at the cursor without advancing, or None past the end."""
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def get(self) -> Token | None:
        """Returns the token at the cursor and advances by one, or None past the end."""
        tok = self.peek()
        if tok is not None:
            self.position += 1
        return tok

    def check(self, type_: str) -> bool:
        tok = self.peek()
        return tok is not None and tok.type == type_

    def at_end(self) -> bool:
        tok = self.peek()
        return tok is None or tok.type == "EOF"

    def primary(self) -> ASTNode:
        """Consumes one operand token and wraps it in a leaf node."""
        index = self.position
        tok = self.get()
        if tok is None or tok.type not in operand_tokens:
            raise ParseError(operand_tokens, tok, index)
        if tok.type == "INT":
            # Hand-built tokens may carry the digits as text
            if not isinstance(tok.value, int):
                raise ParseError(operand_tokens, tok, index)
            return integer_node(tok.value, line=tok.line, col=tok.col)
        return identifier_node(str(tok.value), line=tok.line, col=tok.col)

    def additive(self) -> ASTNode:
        left = self.primary()
        while self.check("PLUS"):
            op = self.get()
            assert op is not None  # for mypy
            right = self.primary()
            left = add_node(left, right, line=op.line, col=op.col)
        return left

    def parse(self, strict: bool = True) -> ASTNode | None:
        """Parse one expression at the cursor and append it to `result`.

        Args:
            strict: Raise on a grammar violation instead of recording it.

        Returns:
            The parsed expression, or None if non-strict parsing failed.
        """
        start = self.position
        try:
            node = self.additive()
        except ParseError as e:
            self.position = start
            if strict:
                raise
            logger.warning("Recorded parse error: %s", e)
            self.errors.append(e)
            return None
        self.result.append(node)
        logger.debug("Parsed %r from tokens %d..%d", node, start, self.position)
        return node

    def synchronize(self) -> None:
        """Skips tokens up to and including the next `;`, or to `EOF`."""
        while not self.at_end():
            tok = self.get()
            assert tok is not None  # for mypy
            if tok.type == "SEMICOLON":
                return

    def parse_program(self, strict: bool = True) -> list[ASTNode]:
        """Parse expressions until `EOF` or the end of the tokens.

        `;` between expressions is optional: any run of semicolons is skipped,
        and an operand that cannot continue the current expression starts the
        next one, so `1 2; x` yields three expressions.
        """
        while True:
            while self.check("SEMICOLON"):
                self.get()
            if self.at_end():
                break
            node = self.parse(strict=strict)
            if node is None:
                logger.debug("Skipping to next statement from token %d", self.position)
                self.synchronize()
        return self.result


def parse_source(source: str, strict: bool = True) -> list[ASTNode]:
    """Tokenize `source` and parse every expression in it."""
    return Parser(tokenize(source)).parse_program(strict=strict)


__all__ = ["ParseError", "Parser", "parse_source"]
