"""Exception classes for generation orchestration."""

from typing import Any


class OrchestrationError(Exception):
    """Base exception for orchestration errors."""

    pass


class InvalidIdentifierError(OrchestrationError):
    """Raised when a repository identifier is not in owner/repo form."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Invalid repository {identifier!r}: use the owner/repo format "
            "(letters, digits, '.', '_' or '-' on each side of one '/')"
        )


class NotReadyError(OrchestrationError):
    """Raised when generation is requested before its preconditions hold."""

    pass


class AlreadyRunningError(OrchestrationError):
    """Raised when generation is requested while another one is in flight."""

    def __init__(self, message: str = "A generation is already running"):
        super().__init__(message)


class StaleRequestError(OrchestrationError):
    """Raised when a result arrives for a request that is no longer active."""

    def __init__(self, message: str = "Result discarded: the session changed while generating"):
        super().__init__(message)


class GenerationError(OrchestrationError):
    """Base exception for failed generations."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ServiceError(GenerationError):
    """Raised when the agent reports a failure or returns no result."""

    pass


class ResponseParseError(GenerationError):
    """Raised when the agent result cannot be normalized."""

    def __init__(self, reason: str, raw: Any = None):
        self.raw = raw
        super().__init__(reason)
