"""
Fixed lexical tables for the monkey language.

The lexer and parser never hard-code character classes or token names; they
consult the tables in this module instead. Every symbol and keyword lookup in
the lexer goes through `token_hashmap`.

Tables:
    symbol_tokens: Single source character → token type.
    keyword_tokens: Exact keyword text → token type.
    token_hashmap: Union of the two, the text → token type lookup the lexer uses.
    CANONICAL_TOKENS: Every token type the lexer can produce.

Character classes:
    WHITESPACE: Characters skipped between tokens.
    IDENT_CHARS: Characters allowed anywhere in an identifier. Digits are
        deliberately absent, so `x1` lexes as `IDENT(x)` followed by `INT(1)`.
    DIGITS: Characters making up an integer literal.
"""

import string

WHITESPACE = " \t\n\r"
IDENT_CHARS = string.ascii_letters + "_"
DIGITS = "0123456789"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

symbol_tokens: dict[str, str] = {
    "=": "ASSIGN",
    "+": "PLUS",
    "<": "LT",
    ">": "GT",
    ";": "SEMICOLON",
    "{": "LBRACE",
    "}": "RBRACE",
    "(": "LPAREN",
    ")": "RPAREN",
    ",": "COMMA",
}

keyword_tokens: dict[str, str] = {
    "let": "LET",
    "fn": "FUNCTION",
    "if": "IF",
    "else": "ELSE",
    "return": "RETURN",
    "true": "TRUE",
    "false": "FALSE",
}

token_hashmap: dict[str, str] = {**symbol_tokens, **keyword_tokens}

CANONICAL_TOKENS: list[str] = [
    "ILLEGAL",
    "EOF",
    "IDENT",
    "INT",
    *symbol_tokens.values(),
    *keyword_tokens.values(),
]

# Tokens that can start a primary expression
operand_tokens: tuple[str, ...] = ("INT", "IDENT")
