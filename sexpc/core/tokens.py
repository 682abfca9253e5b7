from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union

class TokenType(Enum):
    # Punctuation
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()

    # Primary
    IDENTIFIER = auto()
    NUMBER = auto()

    # Special
    CHAR = auto()      # unrecognized single character, passed through
    EOF = auto()

@dataclass
class SourceLocation:
    line: int
    column: int
    file: str = "<stdin>"

    def __str__(self):
        return f"{self.file}:{self.line}:{self.column}"

@dataclass
class Token:
    type: TokenType
    value: Optional[Union[str, int]] = None
    location: Optional[SourceLocation] = None
    text: Optional[str] = None     # source spelling of NUMBER tokens

    def spelling(self, limit: int = 24) -> str:
        """Source text of the token, shortened past ``limit`` characters"""
        text = self.text if self.text is not None else str(self.value)
        if len(text) > limit:
            return f"{text[:limit]}... ({len(text)} characters)"
        return text

    def describe(self) -> str:
        """Short human-readable form used in diagnostics"""
        if self.type == TokenType.EOF:
            return "end of input"
        if self.type == TokenType.OPEN_PAREN:
            return "'('"
        if self.type == TokenType.CLOSE_PAREN:
            return "')'"
        if self.type == TokenType.CHAR:
            return repr(self.value)
        return f"{self.type.name.lower()} '{self.spelling()}'"

    def __str__(self):
        return f"{self.type.name}({self.spelling()!r}) @ {self.location}"
