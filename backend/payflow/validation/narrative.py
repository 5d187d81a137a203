from typing import Any

from payflow.config import MIN_NARRATIVE_LENGTH
from payflow.ir.errors import NarrativeValidationError


NARRATIVE_TOO_SHORT_MESSAGE = "Please provide a longer narrative."


def validate_narrative(value: Any, min_length: int = MIN_NARRATIVE_LENGTH) -> str:
    """
    Return the narrative unchanged if it is text with at least `min_length`
    non-whitespace-padded characters. Raises NarrativeValidationError otherwise.
    """
    if not isinstance(value, str) or len(value.strip()) < min_length:
        raise NarrativeValidationError(NARRATIVE_TOO_SHORT_MESSAGE)
    return value
