from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.strategies import composite

from monkey.monkey_ast import ASTNode, add_node, identifier_node, integer_node
from monkey.monkey_constants import IDENT_CHARS, INT32_MAX, keyword_tokens
from monkey.monkey_lexer import Token, tokenize
from monkey.monkey_parser import ParseError, Parser, parse_source
from monkey.monkey_transpile import Transpiler

ONE_PLUS_TWO = [Token("INT", 1), Token("PLUS", "+"), Token("INT", 2), Token("EOF", "EOF")]


def make_tokens(*types_vals: tuple[str, Any]) -> list[Token]:
    return [Token(t, v) for t, v in types_vals] + [Token("EOF", "EOF")]


def prune(node: Any) -> Any:
    """Remove source positions so only the tree shape is compared."""
    if isinstance(node, list):
        return [prune(n) for n in node]
    if isinstance(node, dict):
        return {k: prune(v) for k, v in node.items() if k not in ("line", "col")}
    return node


def shape(nodes: list[ASTNode]) -> Any:
    return prune([n.to_dict() for n in nodes])


def test_parse_one_plus_two() -> None:
    p = Parser(ONE_PLUS_TWO)
    p.parse()
    assert p.result == [add_node(integer_node(1), integer_node(2))]


def test_parse_is_left_associative() -> None:
    tokens = make_tokens(
        ("INT", 1), ("PLUS", "+"), ("INT", 2), ("PLUS", "+"), ("INT", 3)
    )
    p = Parser(tokens)
    p.parse()
    assert p.result == [
        add_node(add_node(integer_node(1), integer_node(2)), integer_node(3))
    ]


def test_parse_from_source_keeps_positions() -> None:
    assert parse_source("a + 12") == [
        add_node(identifier_node("a", 1, 1), integer_node(12, 1, 5), line=1, col=3)
    ]


def test_parse_single_operand() -> None:
    assert Parser(make_tokens(("IDENT", "x"))).parse() == identifier_node("x")


def test_parse_does_not_consume_eof() -> None:
    p = Parser(ONE_PLUS_TWO)
    p.parse()
    assert p.position == 3
    assert p.peek() == Token("EOF", "EOF")


def test_parse_without_trailing_eof() -> None:
    p = Parser([Token("INT", 4)])
    assert p.parse() == integer_node(4)
    assert p.peek() is None


def test_repeated_parse_continues_from_cursor() -> None:
    p = Parser(make_tokens(("INT", 1), ("PLUS", "+"), ("IDENT", "x"), ("INT", 5)))
    p.parse()
    p.parse()
    assert p.result == [
        add_node(integer_node(1), identifier_node("x")),
        integer_node(5),
    ]


def test_peek_does_not_advance() -> None:
    p = Parser(ONE_PLUS_TWO)
    assert p.peek() == Token("INT", 1)
    assert p.peek() == Token("INT", 1)
    assert p.position == 0


def test_get_advances_in_order() -> None:
    p = Parser(ONE_PLUS_TWO)
    assert p.get() == Token("INT", 1)
    assert p.get() == Token("PLUS", "+")
    assert p.position == 2


def test_get_and_peek_past_end_return_none() -> None:
    p = Parser([Token("INT", 1)])
    p.get()
    assert p.get() is None
    assert p.peek() is None
    assert p.position == 1


@pytest.mark.parametrize(  # type: ignore[misc]
    "tokens,position,actual",
    [
        (make_tokens(("PLUS", "+"), ("INT", 1)), 0, Token("PLUS", "+")),
        (make_tokens(("INT", 1), ("PLUS", "+"), ("SEMICOLON", ";")), 2, Token("SEMICOLON", ";")),
        (make_tokens(("INT", 1), ("PLUS", "+")), 2, Token("EOF", "EOF")),
        ([Token("INT", 1), Token("PLUS", "+")], 2, None),
        ([], 0, None),
        (make_tokens(("ILLEGAL", "@")), 0, Token("ILLEGAL", "@")),
        (make_tokens(("LET", "let")), 0, Token("LET", "let")),
    ],
)
def test_grammar_violation_raises(
    tokens: list[Token], position: int, actual: Token | None
) -> None:
    p = Parser(tokens)
    with pytest.raises(ParseError) as excinfo:
        p.parse()
    err = excinfo.value
    assert err.expected == ("INT", "IDENT")
    assert err.actual == actual
    assert err.position == position
    assert p.result == []
    assert p.position == 0


def test_int_token_with_text_payload_raises_parse_error() -> None:
    bad = Token("INT", "5", 1, 1)
    p = Parser([bad])
    with pytest.raises(ParseError) as excinfo:
        p.parse()
    assert excinfo.value.actual == bad
    assert excinfo.value.position == 0
    assert p.result == []
    assert p.position == 0


def test_parse_error_message_has_location() -> None:
    with pytest.raises(SyntaxError, match=r"got Token\(RPAREN, \)\) at line 1, col 5"):
        parse_source("1 + )")


def test_parse_error_message_end_of_input() -> None:
    with pytest.raises(ParseError, match="got end of input"):
        Parser([Token("INT", 1), Token("PLUS", "+")]).parse()


def test_failed_parse_restores_cursor_after_earlier_success() -> None:
    p = Parser(make_tokens(("INT", 1), ("IDENT", "x"), ("PLUS", "+")))
    p.parse()
    with pytest.raises(ParseError):
        p.parse()
    assert p.position == 1
    assert p.result == [integer_node(1)]


def test_non_strict_parse_records_error() -> None:
    p = Parser(make_tokens(("PLUS", "+")))
    assert p.parse(strict=False) is None
    assert len(p.errors) == 1
    assert p.errors[0].actual == Token("PLUS", "+")
    assert p.result == []
    assert p.position == 0


def test_parse_program_splits_on_semicolons() -> None:
    assert shape(parse_source("1 + 2; x;; y + 3 + z;")) == shape(
        [
            add_node(integer_node(1), integer_node(2)),
            identifier_node("x"),
            add_node(add_node(identifier_node("y"), integer_node(3)), identifier_node("z")),
        ]
    )


def test_parse_program_semicolons_are_optional() -> None:
    assert shape(parse_source("1 2; x")) == shape(
        [integer_node(1), integer_node(2), identifier_node("x")]
    )


def test_parse_program_empty() -> None:
    assert parse_source("") == []
    assert parse_source(";;") == []


def test_parse_program_strict_raises() -> None:
    with pytest.raises(ParseError):
        parse_source("1 + ; 2")


def test_parse_program_non_strict_skips_to_next_statement() -> None:
    p = Parser(tokenize("1 + ; let x; 2 + y"))
    result = p.parse_program(strict=False)
    assert shape(result) == shape([add_node(integer_node(2), identifier_node("y"))])
    assert [e.actual.type for e in p.errors if e.actual] == ["SEMICOLON", "LET"]


def test_parser_does_not_mutate_tokens() -> None:
    tokens = tokenize("a + 1; b")
    snapshot = list(tokens)
    Parser(tokens).parse_program()
    assert tokens == snapshot


@composite
def operand_sources(draw: Any) -> str:
    if draw(st.booleans()):
        return str(draw(st.integers(min_value=0, max_value=INT32_MAX)))
    name = draw(st.text(alphabet=IDENT_CHARS, min_size=1, max_size=8))
    return name + "_" if name in keyword_tokens else name


@composite
def additive_sources(draw: Any) -> str:
    operands = draw(st.lists(operand_sources(), min_size=1, max_size=12))
    glue = draw(st.sampled_from(["+", " + ", "\n+\t"]))
    return glue.join(operands)


@given(additive_sources())  # type: ignore[misc]
def test_chain_is_left_leaning(source: str) -> None:
    (node,) = parse_source(source)
    count = source.count("+")
    depth = 0
    while node.kind == "add":
        assert node.right.kind in ("integer", "identifier")
        node = node.left
        depth += 1
    assert depth == count


@given(st.lists(additive_sources(), min_size=1, max_size=4))  # type: ignore[misc]
def test_infix_round_trip(sources: list[str]) -> None:
    ast = parse_source(";".join(sources))
    text = Transpiler("infix").transpile(ast)
    assert shape(parse_source(text)) == shape(ast)


@given(st.text(max_size=60))  # type: ignore[misc]
def test_non_strict_parse_never_raises_parse_error(text: str) -> None:
    try:
        tokens = tokenize(text)
    except SyntaxError:
        return  # oversized integer literal
    p = Parser(tokens)
    p.parse_program(strict=False)
    assert p.at_end()
