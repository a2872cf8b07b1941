import pytest
from hypothesis import given, strategies as st

from peano.errors import PeanoLexError, PeanoSyntaxError
from peano.reader.scanner import Token, lex, line_col, next_token


@pytest.mark.parametrize(
    "source,expected",
    [
        ("def", [("def", "def")]),
        ("eq", [("eq", "eq")]),
        ("z", [("zero", "z")]),
        ("s", [("succ", "s")]),
        ("if then else", [("if", "if"), ("then", "then"), ("else", "else")]),
        ("( ) = ,", [("lparen", "("), ("rparen", ")"), ("equals", "="), ("comma", ",")]),
        ("x1", [("ident", "x1")]),
        ("def x1 = s(z)", [("def", "def"), ("ident", "x1"), ("equals", "="),
                           ("succ", "s"), ("lparen", "("), ("zero", "z"), ("rparen", ")")]),
        ("f(a,b)", [("ident", "f"), ("lparen", "("), ("ident", "a"), ("comma", ","),
                    ("ident", "b"), ("rparen", ")")]),
        ("  \n\t z \n", [("zero", "z")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens[-1] == ("end", None)
    assert tokens[:-1] == expected


@pytest.mark.parametrize(
    "source",
    ["defX", "define", "ifVal", "eqs", "zz", "z1", "sub", "s2", "thenx", "elseIf", "iff"],
)
def test_keyword_prefixed_identifiers_are_one_token(source):
    token, offset = next_token(source, 0)
    assert token == Token("ident", source)
    assert offset == len(source)


def test_next_token_threads_offset():
    source = "def add(a, b)"
    token, offset = next_token(source, 0)
    assert token == ("def", "def") and offset == 3
    token, offset = next_token(source, offset)
    assert token == ("ident", "add") and offset == 7
    # re-scanning from the same offset gives the same answer
    assert next_token(source, 7) == next_token(source, 7) == (("lparen", "("), 8)


def test_end_token_after_trailing_whitespace():
    token, offset = next_token("z   ", 1)
    assert token.type == "end"
    assert token.value is None
    assert offset == 4


def test_keyword_followed_by_punctuation():
    assert list(lex("s(z)"))[:2] == [("succ", "s"), ("lparen", "(")]
    assert list(lex("if(eq("))[:3] == [("if", "if"), ("lparen", "("), ("eq", "eq")]


@pytest.mark.parametrize("source,offset", [("+", 0), ("def x = 1", 8), ("a _b", 2), ("f(x);", 4)])
def test_unrecognized_character(source, offset):
    with pytest.raises(PeanoLexError) as info:
        list(lex(source))
    assert info.value.offset == offset
    assert isinstance(info.value, PeanoSyntaxError)


def test_line_col():
    source = "def a = z\ndef b = s(z)\n"
    assert line_col(source, 0) == (1, 1)
    assert line_col(source, 10) == (2, 1)
    assert line_col(source, 14) == (2, 5)


ident_strat = st.from_regex(r"[A-Za-z][A-Za-z0-9]{0,8}", fullmatch=True)


@given(ident_strat)
def test_identifier_or_keyword_is_single_token(word):
    tokens = list(lex(word))
    assert len(tokens) == 2
    assert tokens[0].value == word
