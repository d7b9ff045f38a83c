"""Agent transport clients."""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel

from .errors import AgentConfigurationError
from .prompts import AGENTS

if TYPE_CHECKING:
    from anthropic import AsyncAnthropic

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 8192


class AgentResponse(BaseModel):
    """Payload of a successful agent call."""

    result: str | dict[str, Any] | None = None
    message: str | None = None


class AgentReply(BaseModel):
    """Outcome of one agent call."""

    success: bool
    response: AgentResponse | None = None
    error: str | None = None

    @classmethod
    def ok(cls, result: str | dict[str, Any]) -> "AgentReply":
        return cls(success=True, response=AgentResponse(result=result))

    @classmethod
    def failed(cls, error: str) -> "AgentReply":
        return cls(success=False, error=error)


class AgentClient(Protocol):
    """Anything that can send one message to an agent and await the reply."""

    async def call(self, message: str, agent_id: str) -> AgentReply: ...


class AnthropicAgentClient:
    """Agent client backed by the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        """Initialize the client.

        Args:
            api_key: Anthropic API key. If not provided, uses ANTHROPIC_API_KEY env var.
            model: Claude model that plays the agent.
            max_tokens: Response token limit.

        Raises:
            AgentConfigurationError: If no API key is configured.
        """
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise AgentConfigurationError(
                "No Anthropic API key configured. "
                "Set ANTHROPIC_API_KEY environment variable or pass api_key parameter."
            )
        self.model = model
        self.max_tokens = max_tokens
        self._client: "AsyncAnthropic | None" = None

    @property
    def client(self) -> "AsyncAnthropic":
        """Lazy-load the Anthropic client."""
        if self._client is None:
            try:
                from anthropic import AsyncAnthropic
            except ImportError:
                raise AgentConfigurationError(
                    "The anthropic package is not installed. "
                    "Install it with: pip install anthropic"
                )
            self._client = AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def call(self, message: str, agent_id: str) -> AgentReply:
        """Send a message to an agent.

        Transport and API failures are reported in the reply, never raised.
        """
        system_prompt = AGENTS.get(agent_id)
        if system_prompt is None:
            return AgentReply.failed(f"Unknown agent: {agent_id}")

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": message}],
            )
        except AgentConfigurationError as e:
            return AgentReply.failed(str(e))
        except Exception as e:
            error_type = type(e).__name__
            status_code = getattr(e, "status_code", None)
            logger.warning("Agent call failed with %s (status %s)", error_type, status_code)
            if "AuthenticationError" in error_type:
                return AgentReply.failed(
                    "Invalid Anthropic API key. Please check your API key."
                )
            return AgentReply.failed(str(e) or f"Agent call failed: {error_type}")

        # Extract text from response
        response_text = ""
        for block in response.content:
            if hasattr(block, "text"):
                response_text += block.text

        return AgentReply.ok(response_text)


class ReplayAgentClient:
    """Agent client that answers every call with a stored payload."""

    def __init__(self, payload: str | dict[str, Any]):
        self.payload = payload
        self.messages: list[tuple[str, str]] = []

    @classmethod
    def from_file(cls, path: str | Path) -> "ReplayAgentClient":
        return cls(Path(path).read_text(encoding="utf-8"))

    async def call(self, message: str, agent_id: str) -> AgentReply:
        self.messages.append((message, agent_id))
        return AgentReply.ok(self.payload)
