from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple
from .tokens import SourceLocation


class NodeKind(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()
    LIST = auto()


class ASTNode(ABC):
    """Base class for the three syntax tree variants.

    Nodes are frozen once built. ``kind`` lets callers branch on the variant
    without isinstance checks; ``accept`` routes to the matching visitor
    method.
    """
    kind: NodeKind

    @abstractmethod
    def accept(self, visitor):
        pass

    @abstractmethod
    def to_sexpr(self) -> str:
        pass


@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    value: int
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    kind = NodeKind.NUMBER

    def accept(self, visitor):
        return visitor.visit_number(self)

    def to_sexpr(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Identifier(ASTNode):
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    kind = NodeKind.IDENTIFIER

    def accept(self, visitor):
        return visitor.visit_identifier(self)

    def to_sexpr(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListNode(ASTNode):
    children: Tuple[ASTNode, ...] = ()
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    kind = NodeKind.LIST

    def __post_init__(self):
        # freeze whatever sequence the caller handed in
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))

    def accept(self, visitor):
        return visitor.visit_list(self)

    def to_sexpr(self) -> str:
        return '(' + ' '.join(child.to_sexpr() for child in self.children) + ')'

    @property
    def head(self) -> Optional[ASTNode]:
        return self.children[0] if self.children else None
