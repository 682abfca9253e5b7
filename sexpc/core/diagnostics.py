from enum import Enum
from dataclasses import dataclass
from typing import Callable, List, Optional
from .tokens import SourceLocation, Token
from ..utils.term import print_error, print_warning


class DiagnosticLevel(Enum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class ErrorKind(Enum):
    # parse errors
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNTERMINATED_LIST = "UnterminatedList"
    NUMBER_OUT_OF_RANGE = "NumberOutOfRange"
    # codegen errors
    UNDEFINED_SYMBOL = "UndefinedSymbol"
    EMPTY_FORM = "EmptyFormError"
    INVALID_BINDING_TARGET = "InvalidBindingTarget"
    BACKEND_FAILURE = "BackendFailure"

    @property
    def is_parse_error(self) -> bool:
        return self in _PARSE_ERRORS


_PARSE_ERRORS = {
    ErrorKind.UNEXPECTED_TOKEN,
    ErrorKind.UNTERMINATED_LIST,
    ErrorKind.NUMBER_OUT_OF_RANGE,
}


@dataclass
class Diagnostic:
    level: DiagnosticLevel
    kind: ErrorKind
    message: str
    location: Optional[SourceLocation] = None
    token: Optional[Token] = None

    def format(self) -> str:
        """Single-line text: '<kind>: <message> [at <location>]'"""
        result = f"{self.kind.value}: {self.message}"
        if self.location:
            result += f" at {self.location}"
        return result


class DiagnosticEngine:
    """Collects diagnostics and echoes each one to a sink as it is reported.

    The default sink prints through the rich console (``Error: ...`` on
    stderr). Pass ``echo=False`` to only collect, or a custom ``sink``.
    """

    def __init__(self, echo: bool = True, sink: Optional[Callable[[Diagnostic], None]] = None):
        self.diagnostics: List[Diagnostic] = []
        self.error_count = 0
        self.warning_count = 0
        self.echo = echo
        self.sink = sink

    def report(self, diag: Diagnostic) -> Diagnostic:
        self.diagnostics.append(diag)
        if diag.level == DiagnosticLevel.ERROR:
            self.error_count += 1
        elif diag.level == DiagnosticLevel.WARNING:
            self.warning_count += 1
        if self.sink is not None:
            self.sink(diag)
        elif self.echo:
            _print_diagnostic(diag)
        return diag

    def error(self, kind: ErrorKind, message: str, location: Optional[SourceLocation] = None,
              token: Optional[Token] = None) -> Diagnostic:
        return self.report(Diagnostic(DiagnosticLevel.ERROR, kind, message, location, token))

    def has_errors(self) -> bool:
        return self.error_count > 0

    def kinds(self) -> List[ErrorKind]:
        return [d.kind for d in self.diagnostics]

    def clear(self):
        self.diagnostics.clear()
        self.error_count = 0
        self.warning_count = 0


def _print_diagnostic(diag: Diagnostic):
    if diag.level == DiagnosticLevel.ERROR:
        print_error(diag.format())
    else:
        print_warning(diag.format())
