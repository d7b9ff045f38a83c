"""Generation lifecycle orchestration."""

import asyncio
import logging
import re

from ..agent.client import AgentClient, AgentReply
from ..agent.prompts import MANAGER_AGENT_ID, compose_message
from ..categories import TestCategory
from ..schema.models import GenerationResult
from ..schema.normalizer import normalize
from ..schema.sample import SAMPLE_IDENTIFIER, sample_result
from .errors import (
    AlreadyRunningError,
    InvalidIdentifierError,
    NotReadyError,
    ResponseParseError,
    ServiceError,
    StaleRequestError,
)
from .progress import ProgressAnnouncer
from .selection import SelectionState, initial_active, reconcile_active, visible_categories
from .state import ErrorKind, GenerationParams, GenerationState, GenerationStatus

logger = logging.getLogger(__name__)

IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+/[a-zA-Z0-9._-]+$")

GENERIC_FAILURE_MESSAGE = "Test generation failed. Please try again."
PARSE_FAILURE_MESSAGE = (
    "Failed to parse test generation results. "
    "The agent returned an unexpected format."
)


def is_valid_identifier(identifier: str) -> bool:
    """Check that an identifier is in owner/repo form."""
    return bool(IDENTIFIER_PATTERN.match(identifier.strip()))


class GenerationOrchestrator:
    """Owns the generation state machine and the derived view state.

    State only changes through the methods below. At most one generation
    is in flight; a result that arrives after the session changed is
    discarded.
    """

    def __init__(
        self,
        client: AgentClient,
        announcer: ProgressAnnouncer | None = None,
        agent_id: str = MANAGER_AGENT_ID,
        selection: SelectionState | None = None,
    ):
        self.client = client
        self.announcer = announcer or ProgressAnnouncer()
        self.agent_id = agent_id
        self.selection = selection or SelectionState()
        self.active_category: TestCategory | None = reconcile_active(
            None, visible_categories(self.selection)
        )
        self._state = GenerationState.idle()
        self._request_token = 0

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def status(self) -> GenerationStatus:
        return self._state.status

    @property
    def result(self) -> GenerationResult | None:
        return self._state.result

    @property
    def can_generate(self) -> bool:
        """Whether a generate() call would be accepted right now."""
        return self._state.can_generate and self.selection.any_selected

    def _transition(self, state: GenerationState) -> None:
        if state.status != self._state.status:
            logger.info("Generation state: %s -> %s", self._state.status.value, state.status.value)
        self._state = state

    def connect(self, identifier: str) -> GenerationState:
        """Select a repository. Local validation only.

        Raises:
            InvalidIdentifierError: If identifier is not owner/repo.
            AlreadyRunningError: If a generation is in flight.
        """
        if self._state.status == GenerationStatus.RUNNING:
            raise AlreadyRunningError("Cannot change repository while generating")
        identifier = identifier.strip()
        if not is_valid_identifier(identifier):
            raise InvalidIdentifierError(identifier)

        self._request_token += 1
        self._transition(GenerationState.connected(identifier))
        return self._state

    def disconnect(self) -> GenerationState:
        """Return to idle, dropping any result, error or in-flight request."""
        self._request_token += 1
        self.announcer.stop()
        self._transition(GenerationState.idle())
        return self._state

    def toggle(self, category: TestCategory) -> None:
        self.selection.toggle(category)
        self._reconcile()

    def toggle_all(self) -> None:
        self.selection.toggle_all()
        self._reconcile()

    def select_tab(self, category: TestCategory) -> TestCategory | None:
        """Make a category active if it is visible."""
        self.active_category = reconcile_active(category, visible_categories(self.selection))
        return self.active_category

    def _reconcile(self) -> None:
        self.active_category = reconcile_active(
            self.active_category, visible_categories(self.selection)
        )

    def load_sample(self) -> GenerationResult:
        """Show the built-in sample result without calling the agent."""
        if self._state.status == GenerationStatus.RUNNING:
            raise AlreadyRunningError()
        result = sample_result()
        self.connect(SAMPLE_IDENTIFIER)
        self._apply_result(result)
        return result

    async def generate(self, params: GenerationParams) -> GenerationResult:
        """Run one generation.

        Args:
            params: Repository, branch, priorities, selection and framework.

        Returns:
            The normalized result.

        Raises:
            AlreadyRunningError: If a generation is already in flight.
            NotReadyError: If not connected to params.identifier or nothing is selected.
            ServiceError: If the agent failed or returned no result.
            ResponseParseError: If the result could not be normalized.
            StaleRequestError: If the session changed before the result arrived.
        """
        if self._state.status == GenerationStatus.RUNNING:
            raise AlreadyRunningError()
        if not self._state.can_generate:
            raise NotReadyError("Connect to a repository before generating")
        if params.identifier != self._state.identifier:
            raise NotReadyError(
                f"Connected to {self._state.identifier}, not {params.identifier}"
            )
        if not params.selected.any_selected:
            raise NotReadyError("Select at least one test category")

        self._request_token += 1
        token = self._request_token
        self.selection = SelectionState(params.selected.selected())
        self._reconcile()
        self._transition(self._state.running())

        message = compose_message(
            identifier=params.identifier,
            branch=params.branch,
            priorities=params.priorities,
            categories=params.selected.selected_names(),
            framework=params.framework,
        )

        try:
            async with self.announcer.running():
                reply = await self.client.call(message, self.agent_id)
        except asyncio.CancelledError:
            if token == self._request_token:
                self._transition(self._state.failed(ErrorKind.SERVICE, "Generation cancelled"))
            raise
        except Exception as e:
            logger.exception("Agent client raised during generation")
            reply = AgentReply.failed(str(e) or "An unexpected error occurred")

        if token != self._request_token:
            logger.warning("Discarding result for %s: session changed", params.identifier)
            raise StaleRequestError()

        return self._settle(reply)

    def _settle(self, reply: AgentReply) -> GenerationResult:
        raw = reply.response.result if reply.response is not None else None
        if not reply.success or raw is None or raw == "":
            reason = reply.error or (reply.response and reply.response.message) or GENERIC_FAILURE_MESSAGE
            logger.warning("Agent call failed: %s", reason)
            self._transition(self._state.failed(ErrorKind.SERVICE, reason))
            raise ServiceError(reason)

        result = normalize(raw)
        if result is None:
            logger.warning("Agent result could not be normalized")
            self._transition(self._state.failed(ErrorKind.PARSE, PARSE_FAILURE_MESSAGE))
            raise ResponseParseError(PARSE_FAILURE_MESSAGE, raw)

        self._apply_result(result)
        return result

    def _apply_result(self, result: GenerationResult) -> None:
        self._transition(GenerationState(
            status=GenerationStatus.SUCCEEDED,
            identifier=self._state.identifier,
            result=result,
        ))
        first = initial_active(self.selection, result)
        if first is not None:
            self.active_category = first
        self._reconcile()
        logger.info(
            "Generated %d test(s) across %d category section(s)",
            result.total_tests,
            len(result.available_categories()),
        )
