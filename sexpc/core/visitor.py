from abc import ABC, abstractmethod
from .ast import NumberLiteral, Identifier, ListNode

class ASTVisitor(ABC):
    @abstractmethod
    def visit_number(self, node: NumberLiteral): pass

    @abstractmethod
    def visit_identifier(self, node: Identifier): pass

    @abstractmethod
    def visit_list(self, node: ListNode): pass
