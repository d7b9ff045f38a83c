"""Generation state and request parameters."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..schema.models import GenerationResult
from .selection import SelectionState

Framework = Literal["auto", "jest", "pytest", "mocha", "cypress", "playwright"]


class GenerationStatus(str, Enum):
    """Lifecycle of a generation session."""

    IDLE = "idle"
    CONNECTED = "connected"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (GenerationStatus.SUCCEEDED, GenerationStatus.FAILED)


class ErrorKind(str, Enum):
    """Why a generation failed."""

    SERVICE = "service"
    PARSE = "parse"


@dataclass(frozen=True)
class GenerationState:
    """Snapshot of the session; replaced on every transition."""

    status: GenerationStatus = GenerationStatus.IDLE
    identifier: str | None = None
    result: GenerationResult | None = None
    error_kind: ErrorKind | None = None
    reason: str | None = None

    @classmethod
    def idle(cls) -> "GenerationState":
        return cls()

    @classmethod
    def connected(cls, identifier: str) -> "GenerationState":
        return cls(status=GenerationStatus.CONNECTED, identifier=identifier)

    def running(self) -> "GenerationState":
        return GenerationState(status=GenerationStatus.RUNNING, identifier=self.identifier)

    def succeeded(self, result: GenerationResult) -> "GenerationState":
        return replace(self, status=GenerationStatus.SUCCEEDED, result=result)

    def failed(self, kind: ErrorKind, reason: str) -> "GenerationState":
        return replace(self, status=GenerationStatus.FAILED, error_kind=kind, reason=reason)

    @property
    def can_generate(self) -> bool:
        """Connected, or finished a previous run, for a known repository."""
        return self.identifier is not None and (
            self.status == GenerationStatus.CONNECTED or self.status.is_terminal
        )


class GenerationParams(BaseModel):
    """What to ask the agent for."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    identifier: str
    branch: str = "main"
    priorities: str = ""
    selected: SelectionState = Field(default_factory=SelectionState)
    framework: Framework = "auto"

    @field_validator("identifier", "branch")
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()

    @field_validator("branch")
    @classmethod
    def default_branch(cls, value: str) -> str:
        return value or "main"
