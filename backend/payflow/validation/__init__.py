"""
Input validation for the generation endpoint.
"""

from payflow.validation.narrative import (
    NARRATIVE_TOO_SHORT_MESSAGE,
    validate_narrative,
)

__all__ = [
    "NARRATIVE_TOO_SHORT_MESSAGE",
    "validate_narrative",
]
