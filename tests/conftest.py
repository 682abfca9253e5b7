import pytest

from sexpc.core.backend import Backend
from sexpc.core.diagnostics import DiagnosticEngine
from sexpc.core.errors import BackendError


class RecordingBackend(Backend):
    """Backend double: constants are ('const', v), composites ('call', values)"""

    def __init__(self, fail_composite: bool = False):
        self.constants = []
        self.composites = []
        self.fail_composite = fail_composite

    def constant(self, value):
        self.constants.append(value)
        return ('const', value)

    def composite(self, values):
        self.composites.append(list(values))
        if self.fail_composite:
            raise BackendError("composite rejected")
        return ('call', tuple(values))


@pytest.fixture
def diagnostics():
    return DiagnosticEngine(echo=False)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def make_backend():
    return RecordingBackend
