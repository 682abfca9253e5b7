import logging
from typing import List, Optional
from .ast import ASTNode, Identifier, ListNode, NumberLiteral
from .diagnostics import DiagnosticEngine, ErrorKind
from .lexer import Lexer
from .result import Result
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Recursive-descent parser over a Lexer with one token of lookahead.

    Every parse method returns a Result. A failure is reported to the
    diagnostic engine once, where it is detected, and then handed back up
    unchanged. An integer literal that is out of range has already been
    consumed when it is reported, so the enclosing list is read through its
    closing paren before the failure is returned.
    """

    def __init__(self, lexer: Lexer, diagnostics: Optional[DiagnosticEngine] = None,
                 int_width: int = 32):
        self.lexer = lexer
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticEngine()
        self.int_width = int_width
        self.int_max = (1 << (int_width - 1)) - 1
        # lookahead is filled on demand so a finished top-level form does not
        # block on input for the next one
        self._current: Optional[Token] = None

    @property
    def current(self) -> Token:
        if self._current is None:
            self._current = self.lexer.next()
        return self._current

    def advance(self):
        self._current = None

    def _fail(self, kind: ErrorKind, message: str, token: Token) -> Result:
        diag = self.diagnostics.error(kind, message, token.location, token=token)
        return Result.failure(diag)

    def parse_expression(self) -> Result:
        tok = self.current
        if tok.type == TokenType.IDENTIFIER:
            return self._parse_identifier()
        if tok.type == TokenType.NUMBER:
            return self._parse_number()
        if tok.type == TokenType.OPEN_PAREN:
            return self._parse_list()
        return self._fail(ErrorKind.UNEXPECTED_TOKEN,
                          f"unexpected {tok.describe()} when expecting an expression", tok)

    def _parse_identifier(self) -> Result:
        tok = self.current
        node = Identifier(tok.value, location=tok.location)
        self.advance()  # consume the identifier
        return Result.success(node)

    def _parse_number(self) -> Result:
        tok = self.current
        if tok.value > self.int_max:
            self.advance()
            return self._fail(ErrorKind.NUMBER_OUT_OF_RANGE,
                              f"integer literal {tok.spelling()} does not fit in a signed "
                              f"{self.int_width}-bit integer", tok)
        node = NumberLiteral(tok.value, location=tok.location)
        self.advance()  # consume the number
        return Result.success(node)

    def _parse_list(self) -> Result:
        open_tok = self.current
        self.advance()  # eat (
        children: List[ASTNode] = []
        deferred: Optional[Result] = None
        while self.current.type != TokenType.CLOSE_PAREN:
            if self.current.type == TokenType.EOF:
                return self._fail(ErrorKind.UNTERMINATED_LIST,
                                  f"end of input before ')' closing the list opened at {open_tok.location}",
                                  self.current)
            child = self.parse_expression()
            if not child.ok:
                if child.error.kind != ErrorKind.NUMBER_OUT_OF_RANGE:
                    return child
                # the literal was consumed; keep reading to the closing paren
                if deferred is None:
                    deferred = child
                continue
            children.append(child.value)
        self.advance()  # eat )
        if deferred is not None:
            return deferred
        node = ListNode(tuple(children), location=open_tok.location)
        logger.debug("parsed list with %d children at %s", len(children), open_tok.location)
        return Result.success(node)

    def at_eof(self) -> bool:
        return self.current.type == TokenType.EOF

    def parse_all(self) -> List[ASTNode]:
        """Parse top-level expressions until EOF, keeping the ones that parsed.

        Stops early if an expression fails without consuming any input, since
        retrying would loop on the same token.
        """
        nodes: List[ASTNode] = []
        while not self.at_eof():
            before = self.current
            result = self.parse_expression()
            if result.ok:
                nodes.append(result.value)
            elif self.current is before:
                break
        return nodes
