import io
from typing import List, Optional, Union, TextIO
from .tokens import TokenType, Token, SourceLocation

_EOF = ''


def _is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')


def _is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _digits_to_int(digits: str) -> int:
    # int(str) refuses very long literals; fold digit by digit instead
    value = 0
    for d in digits:
        value = value * 10 + (ord(d) - ord('0'))
    return value


class Lexer:
    """Character-at-a-time scanner for S-expression source.

    Reads from a text stream (or a string) one character per call and keeps a
    single character of pushback between tokens. Never raises on bad input:
    characters it does not recognise come back as CHAR tokens for the parser
    to reject.
    """

    def __init__(self, source: Union[str, TextIO], filename: str = "<stdin>"):
        if isinstance(source, str):
            source = io.StringIO(source)
        self.stream = source
        self.filename = filename
        self.line = 1
        self.column = 0
        # one character of pushback; None means nothing has been read ahead,
        # so the next read happens only when the next token is requested
        self._last_char: Optional[str] = None
        self._at_eof = False

    def _read(self) -> str:
        if self._at_eof:
            return _EOF
        c = self.stream.read(1)
        if c == _EOF:
            self._at_eof = True
            return _EOF
        if c == '\n':
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return c

    def _location(self) -> SourceLocation:
        return SourceLocation(self.line, self.column, self.filename)

    def next(self) -> Token:
        """Return the next token from the stream"""
        if self._last_char is None:
            self._last_char = self._read()
        while self._last_char != _EOF and self._last_char.isspace():
            self._last_char = self._read()

        c = self._last_char
        loc = self._location()

        if c == _EOF:
            return Token(TokenType.EOF, None, loc)

        if c == '(':
            self._last_char = None
            return Token(TokenType.OPEN_PAREN, '(', loc)

        if c == ')':
            self._last_char = None
            return Token(TokenType.CLOSE_PAREN, ')', loc)

        # identifier: [a-zA-Z][a-zA-Z0-9]*
        if _is_alpha(c):
            text = c
            self._last_char = self._read()
            while self._last_char != _EOF and (_is_alpha(self._last_char) or _is_digit(self._last_char)):
                text += self._last_char
                self._last_char = self._read()
            return Token(TokenType.IDENTIFIER, text, loc)

        # number: [1-9][0-9]* | 0
        if _is_digit(c):
            if c == '0':
                self._last_char = None
                return Token(TokenType.NUMBER, 0, loc, text='0')
            digits = ''
            while self._last_char != _EOF and _is_digit(self._last_char):
                digits += self._last_char
                self._last_char = self._read()
            return Token(TokenType.NUMBER, _digits_to_int(digits), loc, text=digits)

        self._last_char = None
        return Token(TokenType.CHAR, c, loc)

    def tokenize(self) -> List[Token]:
        """Drain the stream, returning every token up to and including EOF"""
        tokens: List[Token] = []
        while True:
            tok = self.next()
            tokens.append(tok)
            if tok.type == TokenType.EOF:
                return tokens
