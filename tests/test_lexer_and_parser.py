import pytest
from hypothesis import given, strategies as st

from risp.errors import RispSyntaxError
from risp.reader.parser import lex, TokenStream, read
from risp.types import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"a \\" b"', [("string", '"a \\" b"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(a;inline\n)", [("lparen", "("), ("symbol", "a"), ("rparen", ")")]),
        ("&rest", [("symbol", "&rest")]),
    ],
)
def test_lexer_tokens(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42),
        ("-7", -7),
        ("3.5", 3.5),
        (".5", 0.5),
        ("#t", True),
        ("#f", False),
        ("-", Symbol("-")),
        ("is-empty", Symbol("is-empty")),
        ("1+", Symbol("1+")),
        ('"a\\nb"', "a\nb"),
        ('"say \\"hi\\""', 'say "hi"'),
        ("()", ()),
        ("(a (b) ())", (Symbol("a"), (Symbol("b"),), ())),
        ("'x", (Symbol("quote"), Symbol("x"))),
        ("'(1 2)", (Symbol("quote"), (1, 2))),
        ("''x", (Symbol("quote"), (Symbol("quote"), Symbol("x")))),
    ],
)
def test_parse(source, expected):
    assert read(source) == [expected]


def test_parse_multiple_forms():
    assert read("(def a 1) ; trailing\n a  ") == [(Symbol("def"), Symbol("a"), 1), Symbol("a")]


@pytest.mark.parametrize("source", ["", "    ", "; only a comment", "\n\n"])
def test_empty_sources(source):
    assert read(source) == []


@pytest.mark.parametrize(
    "source,message",
    [
        ("(a b", "Unmatched"),
        (")", "Right paren"),
        ('"open', "end of input"),
        ("'", "after quote"),
        ("(a ')", "Right paren"),
    ],
)
def test_syntax_errors(source, message):
    with pytest.raises(RispSyntaxError, match=message):
        read(source)


def test_parse_expr_is_incremental():
    stream = TokenStream(lex("1 (2) 3"))
    assert stream.parse_expr() == 1
    assert stream.parse_expr() == (2,)
    assert stream.parse_expr() == 3
    assert stream.parse_expr() is None


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu", "Pd"), whitelist_characters="&-_*+?"),
    min_size=1,
    max_size=10,
).filter(lambda s: s not in ("-",) and not s.startswith("#"))

int_strat = st.integers(min_value=-10**6, max_value=10**6)

sexpr_strat = st.recursive(
    st.one_of(symbol_strat.map(Symbol), int_strat, st.booleans()),
    lambda children: st.lists(children, max_size=5).map(tuple),
    max_leaves=20,
)


def _to_source(expr):
    if expr is True:
        return "#t"
    if expr is False:
        return "#f"
    if isinstance(expr, tuple):
        return "(" + " ".join(_to_source(e) for e in expr) + ")"
    return str(expr)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_reader_reads_printed_form(expr):
    assert read(_to_source(expr)) == [expr]


@given(st.text(max_size=30))
def test_reader_only_raises_syntax_errors(source):
    try:
        read(source)
    except RispSyntaxError:
        pass
