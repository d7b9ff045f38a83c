"""Exception classes for the agent transport."""


class AgentError(Exception):
    """Base exception for agent errors."""

    pass


class AgentConfigurationError(AgentError):
    """Raised when the agent client cannot be configured."""

    def __init__(self, message: str = "No Anthropic API key configured"):
        super().__init__(message)
