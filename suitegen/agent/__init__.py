"""Agent transport and prompts."""

from .client import (
    DEFAULT_MODEL,
    AgentClient,
    AgentReply,
    AgentResponse,
    AnthropicAgentClient,
    ReplayAgentClient,
)
from .errors import AgentConfigurationError, AgentError
from .prompts import FRAMEWORKS, MANAGER_AGENT_ID, compose_message

__all__ = [
    # Clients
    "AgentClient",
    "AnthropicAgentClient",
    "ReplayAgentClient",
    "AgentReply",
    "AgentResponse",
    "DEFAULT_MODEL",
    # Errors
    "AgentError",
    "AgentConfigurationError",
    # Prompts
    "FRAMEWORKS",
    "MANAGER_AGENT_ID",
    "compose_message",
]
