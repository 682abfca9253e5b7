class SexpcError(Exception):
    """Base class for sexpc errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BackendError(SexpcError):
    """Raised by a backend that cannot realise the values it was handed"""
    pass
