import pytest
from llvmlite import ir

from sexpc.core.backend import LLVMBackend
from sexpc.core.errors import BackendError


def test_constant_is_i32_by_default():
    backend = LLVMBackend()
    value = backend.constant(5)
    assert isinstance(value, ir.Constant)
    assert str(value) == "i32 5"


def test_constant_width_configurable():
    backend = LLVMBackend(int_width=64)
    assert str(backend.constant(-3)) == "i64 -3"


def test_composite_rejects_non_callable_head():
    backend = LLVMBackend()
    with pytest.raises(BackendError, match="not callable"):
        backend.composite([backend.constant(1), backend.constant(2)])


def test_composite_calls_declared_function():
    backend = LLVMBackend()
    add = backend.declare_function("add", 2)
    call = backend.composite([add, backend.constant(1), backend.constant(2)])
    assert isinstance(call, ir.CallInstr)
    text = backend.finalize()
    assert '"add"' in text
    assert "call i32" in text
    assert "ret void" in text


def test_composite_checks_arity():
    backend = LLVMBackend()
    neg = backend.declare_function("neg", 1)
    with pytest.raises(BackendError, match="takes 1 argument"):
        backend.composite([neg])


def test_declare_function_reuses_existing():
    backend = LLVMBackend()
    assert backend.declare_function("f", 1) is backend.declare_function("f", 1)


def test_finalize_is_idempotent():
    backend = LLVMBackend(module_name="demo")
    first = backend.finalize()
    assert first == backend.finalize()
    assert first.count("ret void") == 1
    assert "demo" in first


def test_composite_after_finalize_fails():
    backend = LLVMBackend()
    f = backend.declare_function("f", 0)
    backend.finalize()
    with pytest.raises(BackendError):
        backend.composite([f])
