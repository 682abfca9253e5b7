import logging
from enum import Enum
from typing import List, Optional, TextIO, Union
from .ast import ASTNode
from .backend import Backend, LLVMBackend
from .codegen import CodeGenerator
from .diagnostics import DiagnosticEngine, ErrorKind
from .lexer import Lexer
from .parser import Parser
from .result import Result
from .symbols import Environment
from .tokens import TokenType
from ..utils.term import print_prompt, print_stage, print_success

logger = logging.getLogger(__name__)

INTERACTIVE_PROMPT = "ready> "


class CompilerConfig:
    def __init__(self):
        self.int_width = 32
        self.module_name = "sexpc"
        self.verbose = False
        self.prompt: Optional[str] = None
        self.echo_diagnostics = True


class DriverStatus(Enum):
    SUCCESS = 0
    INVALID_TOPLEVEL = 2


class Session:
    """One compilation session: a backend, an environment and a diagnostic sink.

    ``run`` is the top-level driver loop; ``parse``/``codegen`` expose the
    individual stages for callers that drive the pipeline themselves.
    """

    def __init__(self, config: Optional[CompilerConfig] = None, backend: Optional[Backend] = None,
                 diagnostics: Optional[DiagnosticEngine] = None):
        self.config = config or CompilerConfig()
        self.diagnostics = diagnostics or DiagnosticEngine(echo=self.config.echo_diagnostics)
        self.backend = backend or LLVMBackend(self.config.module_name, self.config.int_width)
        self.environment = Environment()
        self.codegen_visitor = CodeGenerator(self.backend, self.environment, self.diagnostics)
        self.forms: List[ASTNode] = []
        self.status: Optional[DriverStatus] = None

    def make_parser(self, source: Union[str, TextIO], filename: str = "<stdin>") -> Parser:
        return Parser(Lexer(source, filename), self.diagnostics, self.config.int_width)

    def parse(self, source: Union[str, TextIO], filename: str = "<stdin>") -> Result:
        """Parse a single expression from the start of ``source``"""
        return self.make_parser(source, filename).parse_expression()

    def codegen(self, node: ASTNode) -> Result:
        return self.codegen_visitor.codegen(node)

    def run(self, source: Union[str, TextIO], filename: str = "<stdin>") -> DriverStatus:
        """Read, parse and lower top-level forms until end of input.

        Only a list may start a top-level form. Any other token stops the
        loop with INVALID_TOPLEVEL; parse and codegen failures inside a form
        are reported and the loop moves on to the next form.
        """
        parser = self.make_parser(source, filename)
        failed_at = None
        while True:
            self._prompt()
            tok = parser.current
            if tok.type == TokenType.EOF:
                self.status = DriverStatus.SUCCESS
                return self.status
            if tok.type != TokenType.OPEN_PAREN:
                if failed_at is not tok:
                    self.diagnostics.error(ErrorKind.UNEXPECTED_TOKEN,
                                           f"{tok.describe()} cannot start a top-level form",
                                           tok.location, token=tok)
                self.status = DriverStatus.INVALID_TOPLEVEL
                return self.status

            parsed = parser.parse_expression()
            if not parsed.ok:
                failed_at = parsed.error.token
                continue
            failed_at = None
            self.forms.append(parsed.value)
            result = self.codegen(parsed.value)
            if result.ok:
                logger.debug("%s -> %s", parsed.value.to_sexpr(), result.value)

    def _prompt(self):
        if self.config.prompt:
            print_prompt(self.config.prompt)

    def emit(self) -> Optional[str]:
        finalize = getattr(self.backend, 'finalize', None)
        return finalize() if finalize is not None else None


def _compile(session: Session, source: Union[str, TextIO], filename: str) -> Session:
    print_stage(1, 2, f"Compiling {filename}")
    status = session.run(source, filename)
    print_stage(2, 2, f"Driver finished: {status.name}")
    if status == DriverStatus.SUCCESS and not session.diagnostics.has_errors():
        print_success(f"{len(session.forms)} form(s) lowered")
    return session


def compile_string(source: str, config: Optional[CompilerConfig] = None,
                   filename: str = "<string>") -> Session:
    return _compile(Session(config), source, filename)


def compile_file(filepath: str, config: Optional[CompilerConfig] = None) -> Session:
    with open(filepath, 'r', encoding='utf-8') as f:
        return _compile(Session(config), f, filepath)
