import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence
from llvmlite import ir
from .errors import BackendError

logger = logging.getLogger(__name__)


class Backend(ABC):
    """What the code generator needs from a code-generation library.

    The backend only ever sees resolved values, never names.
    """

    @abstractmethod
    def constant(self, value: int) -> Any:
        pass

    @abstractmethod
    def composite(self, values: Sequence[Any]) -> Any:
        pass


class LLVMBackend(Backend):
    """Backend emitting LLVM IR with llvmlite.

    Top-level forms are lowered into the body of a single ``void`` function;
    the builder stays positioned in its entry block until finalize().
    """

    def __init__(self, module_name: str = "sexpc", int_width: int = 32,
                 toplevel_name: str = "__sexpc_toplevel"):
        self.module = ir.Module(name=module_name)
        self.int_type = ir.IntType(int_width)
        fn_type = ir.FunctionType(ir.VoidType(), [])
        self.toplevel = ir.Function(self.module, fn_type, name=toplevel_name)
        block = self.toplevel.append_basic_block(name="entry")
        self.builder = ir.IRBuilder(block)
        self._finalized = False

    def constant(self, value: int) -> ir.Constant:
        return ir.Constant(self.int_type, value)

    def composite(self, values: Sequence[Any]) -> Any:
        if not values:
            raise BackendError("cannot build a call from an empty value list")
        head, args = values[0], list(values[1:])
        if not isinstance(head, ir.Function):
            raise BackendError(f"value '{head}' is not callable")
        expected = len(head.args)
        if expected != len(args):
            raise BackendError(f"function '{head.name}' takes {expected} argument(s), got {len(args)}")
        if self._finalized:
            raise BackendError("module already finalized")
        logger.debug("emitting call to %s with %d args", head.name, len(args))
        return self.builder.call(head, args)

    def declare_function(self, name: str, arity: int) -> ir.Function:
        """Declare an external ``iN name(iN, ...)`` function in the module"""
        existing = self.module.globals.get(name)
        if isinstance(existing, ir.Function):
            return existing
        fn_type = ir.FunctionType(self.int_type, [self.int_type] * arity)
        return ir.Function(self.module, fn_type, name=name)

    def finalize(self) -> str:
        """Close the top-level function and return the module's IR text"""
        if not self._finalized:
            self.builder.ret_void()
            self._finalized = True
        return str(self.module)
