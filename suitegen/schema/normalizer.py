"""Normalization of raw agent payloads into GenerationResult."""

import json
import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from .errors import ResponseShapeError
from .models import GenerationResult

logger = logging.getLogger(__name__)

# Fenced block, optionally tagged as json
FENCED_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)

# Returned by an attempt that does not apply to the input
_TRY_NEXT = object()


def _from_structured(raw: Any) -> Any:
    """Accept a value that is already structured."""
    if isinstance(raw, GenerationResult):
        return raw.model_dump()
    if isinstance(raw, Mapping):
        return dict(raw)
    return _TRY_NEXT


def _from_text(raw: Any) -> Any:
    """Parse the whole text as JSON."""
    if not isinstance(raw, str):
        return _TRY_NEXT
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return _TRY_NEXT


def _from_fenced_block(raw: Any) -> Any:
    """Parse the contents of the first fenced block."""
    if not isinstance(raw, str):
        return _TRY_NEXT
    match = FENCED_BLOCK_PATTERN.search(raw)
    if not match:
        return _TRY_NEXT
    try:
        return json.loads(match.group(1).strip())
    except json.JSONDecodeError:
        return _TRY_NEXT


ATTEMPTS: tuple[Callable[[Any], Any], ...] = (
    _from_structured,
    _from_text,
    _from_fenced_block,
)


def normalize(raw: Any) -> GenerationResult | None:
    """Normalize an agent payload.

    Attempts run in order and the first one that parses wins. The winner
    must be a mapping that validates as a GenerationResult; individual
    category sections may be missing.

    Args:
        raw: A mapping, a JSON string, or text wrapping JSON in a fenced block.

    Returns:
        The normalized result, or None if the payload is unusable.
    """
    for attempt in ATTEMPTS:
        candidate = attempt(raw)
        if candidate is _TRY_NEXT:
            continue
        logger.debug("Payload parsed by %s", attempt.__name__)
        return _to_result(candidate)

    logger.debug("No parse attempt matched payload of type %s", type(raw).__name__)
    return None


def _to_result(candidate: Any) -> GenerationResult | None:
    if not isinstance(candidate, dict):
        logger.debug("Parsed payload is %s, not a mapping", type(candidate).__name__)
        return None
    try:
        return GenerationResult.model_validate(candidate)
    except ValidationError as e:
        logger.debug("Parsed payload failed validation: %s", e)
        return None


def normalize_or_raise(raw: Any) -> GenerationResult:
    """Normalize an agent payload, raising on failure.

    Raises:
        ResponseShapeError: If the payload cannot be normalized.
    """
    result = normalize(raw)
    if result is None:
        raise ResponseShapeError(
            "Agent response is not a JSON object or a fenced JSON block", raw
        )
    return result
