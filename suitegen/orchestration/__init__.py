"""Generation orchestration: lifecycle, progress and selection."""

from .errors import (
    AlreadyRunningError,
    GenerationError,
    InvalidIdentifierError,
    NotReadyError,
    OrchestrationError,
    ResponseParseError,
    ServiceError,
    StaleRequestError,
)
from .orchestrator import GenerationOrchestrator, is_valid_identifier
from .progress import STATUS_MESSAGES, AnnouncerHandle, ProgressAnnouncer
from .selection import SelectionState, initial_active, reconcile_active, visible_categories
from .state import ErrorKind, GenerationParams, GenerationState, GenerationStatus

__all__ = [
    # Orchestrator
    "GenerationOrchestrator",
    "is_valid_identifier",
    # State
    "GenerationState",
    "GenerationStatus",
    "GenerationParams",
    "ErrorKind",
    # Progress
    "ProgressAnnouncer",
    "AnnouncerHandle",
    "STATUS_MESSAGES",
    # Selection
    "SelectionState",
    "visible_categories",
    "reconcile_active",
    "initial_active",
    # Errors
    "OrchestrationError",
    "InvalidIdentifierError",
    "NotReadyError",
    "AlreadyRunningError",
    "StaleRequestError",
    "GenerationError",
    "ServiceError",
    "ResponseParseError",
]
