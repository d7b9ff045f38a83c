"""Schema-related exceptions."""

from typing import Any


class SchemaError(Exception):
    """Base exception for result schema errors."""

    pass


class ResponseShapeError(SchemaError):
    """Raised when an agent payload cannot be normalized into a result."""

    def __init__(self, message: str, raw: Any = None):
        self.raw = raw
        super().__init__(message)
