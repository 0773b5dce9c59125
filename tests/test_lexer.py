import pytest

from saphire.lexer import Lexer, tokenize
from saphire.tokens import Token, TokenType as T


def _pairs(source):
    return [(tok.type, tok.literal) for tok in tokenize(source)]


def test_single_characters():
    assert _pairs("=+(){},;") == [
        (T.ASSIGN, "="),
        (T.PLUS, "+"),
        (T.LPAREN, "("),
        (T.RPAREN, ")"),
        (T.LBRACE, "{"),
        (T.RBRACE, "}"),
        (T.COMMA, ","),
        (T.SEMICOLON, ";"),
        (T.EOF, ""),
    ]


_PROGRAM_TOKENS = [
    (T.LET, "let"),
    (T.IDENT, "five"),
    (T.ASSIGN, "="),
    (T.NUM, "5"),
    (T.SEMICOLON, ";"),
    (T.LET, "let"),
    (T.IDENT, "ten"),
    (T.ASSIGN, "="),
    (T.NUM, "10"),
    (T.SEMICOLON, ";"),
    (T.LET, "let"),
    (T.IDENT, "add"),
    (T.ASSIGN, "="),
    (T.FUNCTION, "fn"),
    (T.LPAREN, "("),
    (T.IDENT, "x"),
    (T.COMMA, ","),
    (T.IDENT, "y"),
    (T.RPAREN, ")"),
    (T.LBRACE, "{"),
    (T.IDENT, "x"),
    (T.PLUS, "+"),
    (T.IDENT, "y"),
    (T.SEMICOLON, ";"),
    (T.RBRACE, "}"),
    (T.SEMICOLON, ";"),
    (T.LET, "let"),
    (T.IDENT, "result"),
    (T.ASSIGN, "="),
    (T.IDENT, "add"),
    (T.LPAREN, "("),
    (T.IDENT, "five"),
    (T.COMMA, ","),
    (T.IDENT, "ten"),
    (T.RPAREN, ")"),
    (T.SEMICOLON, ";"),
    (T.EOF, ""),
]


@pytest.mark.parametrize(
    "source",
    [
        "let five = 5;\nlet ten = 10;\n\nlet add = fn(x, y) {\n\tx + y;\n};\n"
        "let result = add(five, ten);\n",
        "let five = 5;\nlet ten = 10;\n\nlet add = fn(x, y) {\n\tx + y;\n};\n\n"
        "let result = add(five, ten);",
    ],
)
def test_small_program(source):
    assert _pairs(source) == _PROGRAM_TOKENS


def test_strings():
    assert _pairs('\n"foobar"\n"foo bar"\n') == [
        (T.STRING, "foobar"),
        (T.STRING, "foo bar"),
        (T.EOF, ""),
    ]


def test_array():
    assert _pairs("\n[1, 2];\n") == [
        (T.LBRACKET, "["),
        (T.NUM, "1"),
        (T.COMMA, ","),
        (T.NUM, "2"),
        (T.RBRACKET, "]"),
        (T.SEMICOLON, ";"),
        (T.EOF, ""),
    ]


def test_comments_numbers_and_operators():
    source = """
// comment
// comment again
	// if (n / 2 == 0) {
//   return 1;
// }
// return -1;
{"foo": "bar"}
123
123.123
123.0

5 % 2

2 <= 5
8 >= 1
2 ** 2
"""
    assert _pairs(source) == [
        (T.LBRACE, "{"),
        (T.STRING, "foo"),
        (T.COLON, ":"),
        (T.STRING, "bar"),
        (T.RBRACE, "}"),
        (T.NUM, "123"),
        (T.NUM, "123.123"),
        (T.NUM, "123.0"),
        (T.NUM, "5"),
        (T.MOD, "%"),
        (T.NUM, "2"),
        (T.NUM, "2"),
        (T.LTE, "<="),
        (T.NUM, "5"),
        (T.NUM, "8"),
        (T.GTE, ">="),
        (T.NUM, "1"),
        (T.NUM, "2"),
        (T.POWER, "**"),
        (T.NUM, "2"),
        (T.EOF, ""),
    ]


def test_equality_operators():
    assert _pairs("a == b != !c") == [
        (T.IDENT, "a"),
        (T.EQ, "=="),
        (T.IDENT, "b"),
        (T.NOT_EQ, "!="),
        (T.BANG, "!"),
        (T.IDENT, "c"),
        (T.EOF, ""),
    ]


def test_comment_at_end_without_newline():
    assert _pairs("5 // trailing") == [(T.NUM, "5"), (T.EOF, "")]


def test_unterminated_string_runs_to_end():
    assert _pairs('"abc') == [(T.STRING, "abc"), (T.EOF, "")]


def test_number_with_dangling_dot():
    assert _pairs("1.") == [(T.NUM, "1"), (T.ILLEGAL, "."), (T.EOF, "")]


def test_illegal_character():
    assert _pairs("@") == [(T.ILLEGAL, "@"), (T.EOF, "")]


def test_identifiers_allow_underscores():
    assert _pairs("my_var") == [(T.IDENT, "my_var"), (T.EOF, "")]


def test_eof_repeats_after_input_ends():
    lexer = Lexer("x")
    assert lexer.next_token() == Token(T.IDENT, "x")
    assert lexer.next_token() == Token(T.EOF, "")
    assert lexer.next_token() == Token(T.EOF, "")


def test_iteration_stops_after_eof():
    tokens = list(Lexer(";"))
    assert [tok.type for tok in tokens] == [T.SEMICOLON, T.EOF]


def test_empty_source():
    assert tokenize("") == [Token(T.EOF, "")]