"""Schema layer for agent results."""

from .errors import ResponseShapeError, SchemaError
from .models import GenerationResult, RepositoryInfo, ResultSection
from .normalizer import normalize, normalize_or_raise
from .sample import SAMPLE_IDENTIFIER, sample_result

__all__ = [
    "SchemaError",
    "ResponseShapeError",
    "GenerationResult",
    "RepositoryInfo",
    "ResultSection",
    "normalize",
    "normalize_or_raise",
    "SAMPLE_IDENTIFIER",
    "sample_result",
]
