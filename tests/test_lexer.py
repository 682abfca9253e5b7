import io

from sexpc.core.lexer import Lexer
from sexpc.core.tokens import TokenType


def kinds_and_values(source):
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


def test_set_form_tokens():
    assert kinds_and_values("(set a 5)") == [
        (TokenType.OPEN_PAREN, '('),
        (TokenType.IDENTIFIER, 'set'),
        (TokenType.IDENTIFIER, 'a'),
        (TokenType.NUMBER, 5),
        (TokenType.CLOSE_PAREN, ')'),
        (TokenType.EOF, None),
    ]


def test_leading_zero_is_single_digit_literal():
    assert kinds_and_values("01") == [
        (TokenType.NUMBER, 0),
        (TokenType.NUMBER, 1),
        (TokenType.EOF, None),
    ]


def test_multi_digit_number():
    assert kinds_and_values("1207") == [(TokenType.NUMBER, 1207), (TokenType.EOF, None)]


def test_identifier_maximal_munch():
    assert kinds_and_values("abc12x 9") == [
        (TokenType.IDENTIFIER, 'abc12x'),
        (TokenType.NUMBER, 9),
        (TokenType.EOF, None),
    ]


def test_digits_then_letters_split():
    assert kinds_and_values("12ab") == [
        (TokenType.NUMBER, 12),
        (TokenType.IDENTIFIER, 'ab'),
        (TokenType.EOF, None),
    ]


def test_unknown_characters_pass_through():
    assert kinds_and_values("+ ]") == [
        (TokenType.CHAR, '+'),
        (TokenType.CHAR, ']'),
        (TokenType.EOF, None),
    ]


def test_whitespace_is_skipped():
    assert kinds_and_values(" \n\t( \n ) ") == [
        (TokenType.OPEN_PAREN, '('),
        (TokenType.CLOSE_PAREN, ')'),
        (TokenType.EOF, None),
    ]


def test_eof_is_idempotent():
    lexer = Lexer("x")
    assert lexer.next().type == TokenType.IDENTIFIER
    for _ in range(3):
        assert lexer.next().type == TokenType.EOF


def test_empty_input():
    assert kinds_and_values("") == [(TokenType.EOF, None)]


def test_reads_from_stream():
    assert kinds_and_values(io.StringIO("(x)")) == [
        (TokenType.OPEN_PAREN, '('),
        (TokenType.IDENTIFIER, 'x'),
        (TokenType.CLOSE_PAREN, ')'),
        (TokenType.EOF, None),
    ]


def test_token_locations():
    tokens = Lexer("(a\n  42)", filename="f.lisp").tokenize()
    assert (tokens[0].location.line, tokens[0].location.column) == (1, 1)
    assert (tokens[1].location.line, tokens[1].location.column) == (1, 2)
    assert (tokens[2].location.line, tokens[2].location.column) == (2, 3)
    assert tokens[2].location.file == "f.lisp"
    assert str(tokens[3].location) == "f.lisp:2:5"


def test_very_long_number_does_not_raise():
    tokens = Lexer("9" * 5000 + " x").tokenize()
    assert tokens[0].type == TokenType.NUMBER
    assert tokens[0].value == 10 ** 5000 - 1
    assert len(tokens[0].text) == 5000
    assert "(5000 characters)" in tokens[0].describe()
    assert tokens[1].value == 'x'


def test_close_paren_does_not_read_ahead():
    read = []

    class Stream:
        def __init__(self, text):
            self.chars = iter(text)

        def read(self, n):
            c = next(self.chars, '')
            read.append(c)
            return c

    lexer = Lexer(Stream("()\n("))
    lexer.next()
    lexer.next()
    assert read == ['(', ')']
