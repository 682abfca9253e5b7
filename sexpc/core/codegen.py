import logging
from typing import Any, Callable, Dict, List, Optional
from .ast import ASTNode, Identifier, ListNode, NodeKind, NumberLiteral
from .backend import Backend
from .diagnostics import DiagnosticEngine, ErrorKind
from .errors import BackendError
from .result import Result
from .symbols import Environment
from .visitor import ASTVisitor

logger = logging.getLogger(__name__)

SET_KEYWORD = "set"


class CodeGenerator(ASTVisitor):
    """Post-order walk that lowers syntax trees into backend values.

    Lists whose head names an entry in SPECIAL_FORMS (with the right number
    of operands) go to that form's handler; every other list is a generic
    call whose evaluated children are handed to ``backend.composite``.
    """

    # head identifier -> (operand count, handler method name)
    SPECIAL_FORMS: Dict[str, tuple] = {
        SET_KEYWORD: (2, '_emit_set'),
    }

    def __init__(self, backend: Backend, environment: Optional[Environment] = None,
                 diagnostics: Optional[DiagnosticEngine] = None):
        self.backend = backend
        self.environment = environment if environment is not None else Environment()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticEngine()

    def codegen(self, node: ASTNode) -> Result:
        return node.accept(self)

    def _fail(self, kind: ErrorKind, message: str, node: ASTNode) -> Result:
        return Result.failure(self.diagnostics.error(kind, message, node.location))

    def visit_number(self, node: NumberLiteral) -> Result:
        return Result.success(self.backend.constant(node.value))

    def visit_identifier(self, node: Identifier) -> Result:
        if node.name not in self.environment:
            return self._fail(ErrorKind.UNDEFINED_SYMBOL, f"unknown variable name '{node.name}'", node)
        return Result.success(self.environment.lookup(node.name))

    def visit_list(self, node: ListNode) -> Result:
        if not node.children:
            return self._fail(ErrorKind.EMPTY_FORM, "cannot generate code for an empty form '()'", node)

        handler = self._special_form_handler(node)
        if handler is not None:
            return handler(node)
        return self._emit_call(node)

    def _special_form_handler(self, node: ListNode) -> Optional[Callable[[ListNode], Result]]:
        head = node.head
        if head.kind != NodeKind.IDENTIFIER:
            return None
        entry = self.SPECIAL_FORMS.get(head.name)
        if entry is None:
            return None
        arity, method = entry
        if len(node.children) - 1 != arity:
            return None
        return getattr(self, method)

    def _emit_set(self, node: ListNode) -> Result:
        _, target, expr = node.children
        if target.kind != NodeKind.IDENTIFIER:
            return self._fail(ErrorKind.INVALID_BINDING_TARGET,
                              f"'{SET_KEYWORD}' expects a name to bind, got '{target.to_sexpr()}'", target)
        value = self.codegen(expr)
        if not value.ok:
            return value
        self.environment.bind(target.name, value.value, target.location)
        logger.debug("bound %s", target.name)
        return value

    def _emit_call(self, node: ListNode) -> Result:
        values: List[Any] = []
        for child in node.children:
            result = self.codegen(child)
            if not result.ok:
                return result
            values.append(result.value)
        try:
            return Result.success(self.backend.composite(values))
        except BackendError as e:
            return self._fail(ErrorKind.BACKEND_FAILURE, e.message, node)
