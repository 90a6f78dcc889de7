import pytest

from tinylisp.errors import LexError, ParseError, ParseErrorKind
from tinylisp.reader.lexer import lex
from tinylisp.reader.parser import TokenStream, read_all
from tinylisp.types.cell import (
    INT64_MAX,
    INT64_MIN,
    CellType,
    float_cell,
    int_cell,
    list_cell,
    string_cell,
    symbol_cell,
)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ("()", ["(", ")"]),
        ("((a))", ["(", "(", "a", ")", ")"]),
        ('"hello world"', ['"hello world"']),
        ('(print "a b")', ["(", "print", '"a b"', ")"]),
        (" ; comment\n a b", ["a", "b"]),
        ("(+ 1 2);trailing comment", ["(", "+", "1", "2", ")"]),
        ("; only a comment", []),
        ("", []),
        ("   \n\t  ", []),
        ("foo;bar", ["foo;bar"]),
        ("-5 -x 1.25", ["-5", "-x", "1.25"]),
        ('"a\\"b"', ['"a\\"b"']),
        ('""', ['""']),
        ("(setg x\n  10)", ["(", "setg", "x", "10", ")"]),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize("source", ['"abc', '(print "abc)', '"ends with escape\\"'])
def test_lexer_unterminated_string(source):
    with pytest.raises(LexError):
        list(lex(source))


def test_lexer_error_reports_offset():
    with pytest.raises(LexError) as exc:
        list(lex('(a "oops'))
    assert exc.value.position == 3


def test_lexer_is_lazy():
    tokens = lex('(a) "unterminated')
    assert next(tokens) == "("
    assert next(tokens) == "a"
    assert next(tokens) == ")"
    with pytest.raises(LexError):
        next(tokens)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", int_cell(123)),
        ("-45", int_cell(-45)),
        ("0", int_cell(0)),
        ("3.14", float_cell(3.14)),
        ("-0.5", float_cell(-0.5)),
        ("1.", float_cell(1.0)),
        ("2.5e3", float_cell(2500.0)),
        (".5", float_cell(0.5)),
        ("-.25", float_cell(-0.25)),
        (".", symbol_cell(".")),
        ("-.", symbol_cell("-.")),
        ('"hello"', string_cell("hello")),
        ('""', string_cell("")),
        ('"a;b"', string_cell("a;b")),
        ("foo", symbol_cell("foo")),
        ("-", symbol_cell("-")),
        ("-x", symbol_cell("-x")),
        ("true", symbol_cell("true")),
        ("null", symbol_cell("null")),
        ("()", list_cell()),
        ('(a 1 "s" 2.0)', list_cell([symbol_cell("a"), int_cell(1), string_cell("s"), float_cell(2.0)])),
        (str(INT64_MAX), int_cell(INT64_MAX)),
        (str(INT64_MIN), int_cell(INT64_MIN)),
    ],
)
def test_parser(source, expected):
    result = read_all(source)
    assert len(result) == 1
    assert result[0] == expected
    assert result[0].type is expected.type


def test_nested_lists():
    source = "((a b) (c (d)))"
    expected = list_cell(
        [
            list_cell([symbol_cell("a"), symbol_cell("b")]),
            list_cell([symbol_cell("c"), list_cell([symbol_cell("d")])]),
        ]
    )
    assert read_all(source) == [expected]


def test_reader_leaves_remaining_tokens():
    stream = TokenStream(lex("(a) (b 1) c"))
    assert stream.parse_expr() == list_cell([symbol_cell("a")])
    assert stream.peek() == "("
    assert stream.parse_expr() == list_cell([symbol_cell("b"), int_cell(1)])
    assert stream.parse_expr() == symbol_cell("c")
    assert stream.parse_expr() is None
    assert stream.at_end()


def test_read_all_multiple_top_level_forms():
    assert read_all("1 2 (x)") == [int_cell(1), int_cell(2), list_cell([symbol_cell("x")])]


@pytest.mark.parametrize("source", ["(+ 1 2", "(", "((a)", "(a (b c)"])
def test_missing_close_paren_is_unexpected_eof(source):
    with pytest.raises(ParseError) as exc:
        read_all(source)
    assert exc.value.kind is ParseErrorKind.UNEXPECTED_EOF


@pytest.mark.parametrize("source", [")", "(a))"])
def test_stray_close_paren(source):
    with pytest.raises(ParseError) as exc:
        read_all(source)
    assert exc.value.kind is ParseErrorKind.UNMATCHED_PAREN


@pytest.mark.parametrize(
    "source",
    ["12abc", "1.2.3", "-3x", ".5x", "1_000", "99999999999999999999", "-99999999999999999999"],
)
def test_invalid_number_literals(source):
    with pytest.raises(ParseError) as exc:
        read_all(source)
    assert exc.value.kind is ParseErrorKind.INVALID_NUMBER
    assert exc.value.token == source


def test_deep_nesting_is_read_without_recursion():
    depth = 20000
    (form,) = read_all("(" * depth + "1" + ")" * depth)
    levels = 0
    while form.type is CellType.LIST:
        (form,) = form.value
        levels += 1
    assert levels == depth
    assert form == int_cell(1)


@pytest.mark.parametrize("depth", [1, 100, 20000])
def test_deep_nesting_without_close_is_unexpected_eof(depth):
    with pytest.raises(ParseError) as exc:
        read_all("(" * depth + ")" * (depth - 1))
    assert exc.value.kind is ParseErrorKind.UNEXPECTED_EOF
