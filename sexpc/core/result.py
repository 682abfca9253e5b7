from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar
from .diagnostics import Diagnostic
from .errors import SexpcError

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the diagnostic that explains why there is none.

    Parser and code generator return these instead of raising, so every
    caller has to look at ``ok`` before it touches ``value``.
    """
    value: Optional[T] = None
    error: Optional[Diagnostic] = None

    @classmethod
    def success(cls, value: Any) -> 'Result':
        return cls(value=value)

    @classmethod
    def failure(cls, error: Diagnostic) -> 'Result':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise SexpcError(f"unwrap() on failed result: {self.error.format()}")
        return self.value

    def __bool__(self):
        return self.ok
