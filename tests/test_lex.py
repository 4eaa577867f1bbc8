import pytest

from infixeval.errors import InvalidExpression, InvalidOperator, InvalidSyntax, LexError
from infixeval.lex import OPERATORS, Lexer, tokenize


def values(text):
    return [(t.type, t.value) for t in tokenize(text)]


def test_tokenize_splits_on_whitespace():
    assert values("3 + 4 * 2") == [
        ("NUMBER", 3),
        ("OPERATOR", "+"),
        ("NUMBER", 4),
        ("OPERATOR", "*"),
        ("NUMBER", 2),
    ]


def test_tabs_and_newlines_are_whitespace():
    assert values("\t( 1\n+ 2 )  ") == [
        ("OPERATOR", "("),
        ("NUMBER", 1),
        ("OPERATOR", "+"),
        ("NUMBER", 2),
        ("OPERATOR", ")"),
    ]


def test_every_operator_symbol_is_a_token():
    text = " ".join(OPERATORS)
    assert [t.value for t in tokenize(text)] == list(OPERATORS)
    assert all(t.type == "OPERATOR" for t in tokenize(text))


def test_signed_integers_are_numbers():
    assert values("-5 +7 007") == [("NUMBER", -5), ("NUMBER", 7), ("NUMBER", 7)]


def test_empty_input_has_no_tokens():
    assert values("") == []
    assert values("   \n ") == []


def test_token_info_points_at_the_token():
    tokens = list(tokenize("12 +\n  345", filename="<test>"))
    assert [t.info.column for t in tokens] == [0, 3, 2]
    assert [t.info.lineno for t in tokens] == [1, 1, 2]
    assert [t.info.length for t in tokens] == [2, 1, 3]
    assert tokens[2].info.textpos == 7
    assert tokens[0].info.filename == "<test>"


@pytest.mark.parametrize(
    "word,error",
    [
        ("abc", InvalidExpression),
        ("x1", InvalidExpression),
        ("\u0663", InvalidExpression),
        ("3.5", InvalidSyntax),
        ("12a", InvalidSyntax),
        ("++", InvalidOperator),
        ("(3", InvalidOperator),
        ("-x", InvalidOperator),
    ],
)
def test_invalid_words(word, error):
    with pytest.raises(error) as excinfo:
        list(tokenize("1 + " + word))
    assert isinstance(excinfo.value, LexError)
    assert isinstance(excinfo.value, SyntaxError)
    assert excinfo.value.info.column == 4
    assert excinfo.value.info.length == len(word)


def test_tokens_are_produced_lazily():
    stream = tokenize("1 + bogus")
    assert next(stream).value == 1
    assert next(stream).value == "+"
    with pytest.raises(InvalidExpression):
        next(stream)


def test_lexer_context_peek_does_not_consume():
    ctx = Lexer([("WS", (r"\s+", lambda t: None)), ("WORD", r"\S+")]).input("a b")
    assert ctx.peek().value == "a"
    assert ctx.next().value == "a"
    assert ctx.next().value == "b"
    assert ctx.next() is None
    assert ctx.peek() is None


def test_custom_table_reports_unmatched_input():
    lexer = Lexer([("DIGITS", r"[0-9]+")])
    with pytest.raises(InvalidExpression) as excinfo:
        list(lexer.input("12x"))
    assert excinfo.value.info.column == 2
