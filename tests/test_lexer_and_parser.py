import string

import pytest
from hypothesis import given, strategies as st

from tinyscheme.types.nil import Nil
from tinyscheme.types.pair import Pair, from_list
from tinyscheme.types.symbol import Symbol, TRUE
from tinyscheme.reader.parser import lex, parse, parse_all, TokenStream


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(+ 1 -2.5)", [("lparen", "("), ("atom", "+"), ("atom", "1"), ("atom", "-2.5"), ("rparen", ")")]),
        ("#t #f", [("boolean", "#t"), ("boolean", "#f")]),
        ("#true", [("boolean", "#t"), ("atom", "rue")]),
        ("a(b)c", [("atom", "a"), ("lparen", "("), ("atom", "b"), ("rparen", ")"), ("atom", "c")]),
        ("  foo\n\tbar  ", [("atom", "foo"), ("atom", "bar")]),
        ("#", [("atom", "#")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize("source", ["", "    ", "\n\t \n"])
def test_lexer_blank_input_has_no_tokens(source):
    assert list(lex(source)) == []


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123.0),
        ("-45", -45.0),
        ("+7", 7.0),
        ("3.14", 3.14),
        ("1.", 1.0),
        (".5", 0.5),
        ("#t", TRUE),
        ("#f", Nil),
        ("()", Nil),
        (")", Nil),
        ("abc", Symbol("abc")),
        ("null?", Symbol("null?")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        (".", Symbol(".")),
        ("1.2.3", Symbol("1.2.3")),
        ("1e5", Symbol("1e5")),
        ("12abc", Symbol("12abc")),
    ]
)
def test_parse_atoms(source, expected):
    result = parse(source)
    assert result == expected
    assert type(result) is type(expected)


def test_numbers_are_floats():
    assert isinstance(parse("42"), float)


@pytest.mark.parametrize("source", ["٣", "٣.٥", "-٣", "１２", "१२"])
def test_non_ascii_digits_are_symbols(source):
    assert parse(source) == Symbol(source)


@given(st.text(alphabet="٠١٢٣٤٥٦٧٨٩０１.", min_size=1, max_size=8))
def test_only_ascii_digits_read_as_numbers(name):
    assert parse(name) == Symbol(name)


def test_parse_list():
    assert parse("(a b c)") == from_list([Symbol('a'), Symbol('b'), Symbol('c')])


def test_nested_lists():
    expected = from_list([
        from_list([Symbol('a'), Symbol('b')]),
        from_list([Symbol('c'), 1.0]),
    ])
    assert parse("((a b) (c 1))") == expected


def test_list_is_right_nested_and_nil_terminated():
    result = parse("(1 2)")
    assert isinstance(result, Pair)
    assert result.car == 1.0
    assert result.cdr.car == 2.0
    assert result.cdr.cdr is Nil


def test_no_dotted_pair_syntax():
    assert parse("(a . b)") == from_list([Symbol('a'), Symbol('.'), Symbol('b')])


def test_booleans_inside_lists():
    assert parse("(if #t #f 1)") == from_list([Symbol('if'), TRUE, Nil, 1.0])


def test_parse_reads_one_form_and_discards_the_rest():
    assert parse("1 2 3") == 1.0
    assert parse("(a) (b)") == from_list([Symbol('a')])


def test_parse_empty_input_returns_none():
    assert parse("") is None
    assert parse("   \n") is None


def test_parse_all_reads_every_form():
    forms = list(parse_all("(define a 1)\n(+ a 1)\nfoo"))
    assert forms == [
        from_list([Symbol('define'), Symbol('a'), 1.0]),
        from_list([Symbol('+'), Symbol('a'), 1.0]),
        Symbol('foo'),
    ]


def test_unterminated_list_is_closed_at_end_of_input():
    assert parse("(a (b c") == from_list([Symbol('a'), from_list([Symbol('b'), Symbol('c')])])


def test_token_stream_peek_and_advance():
    stream = TokenStream(lex("(x)"))
    assert stream.peek() == ("lparen", "(")
    assert stream.advance() == ("lparen", "(")
    assert stream.advance() == ("atom", "x")
    assert stream.advance() == ("rparen", ")")
    assert stream.at_end()
    assert stream.advance() == (None, None)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=60))
def test_lexer_no_crash(source):
    tokens = list(lex(source))
    assert all(tok_val for _, tok_val in tokens)


@given(st.text(alphabet="() ab1.#tf+-\n", max_size=40))
def test_parser_no_crash(source):
    for form in parse_all(source):
        assert form is not None


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=8))
def test_parse_list_of_numbers(xs):
    source = "(" + " ".join(map(str, xs)) + ")"
    assert parse(source) == from_list([float(x) for x in xs])


@given(st.text(alphabet=string.ascii_letters + "-?!*<>=_", min_size=1, max_size=12))
def test_symbols_parse_to_themselves(name):
    assert parse(name) == Symbol(name)
