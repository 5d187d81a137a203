import json
from typing import Any, Dict

from payflow.ir.diagram import GenerationResult
from payflow.ir.errors import InvalidModelOutputError
from payflow.utils.log import get_logger


logger = get_logger(__name__)

INVALID_JSON_MESSAGE = "Model did not return valid JSON."
INVALID_MERMAID_MESSAGE = "Model did not return valid Mermaid. Try again."


# ============================================================
# STRICT JSON LOADER (LLM TRUST BOUNDARY)
# ============================================================

def load_model_json(content: str) -> Dict[str, Any]:
    """
    Parse the model's message content.

    JSON mode is requested upstream, so anything that is not valid JSON is
    rejected outright. No fence stripping, no regex extraction.
    A valid JSON value that is not an object yields an empty dict.
    """
    try:
        data = json.loads(content)
    except (TypeError, ValueError) as exc:
        logger.warning("Model content is not JSON: %s", exc)
        raise InvalidModelOutputError(INVALID_JSON_MESSAGE) from exc

    if not isinstance(data, dict):
        return {}
    return data


# ============================================================
# GENERATION PARSER
# ============================================================

def parse_generation(content: str) -> GenerationResult:
    data = load_model_json(content)
    result = GenerationResult(
        mermaid=data.get("mermaid"),
        notes=data.get("notes"),
    )

    if not result.is_sequence_diagram:
        logger.warning(
            "Model returned a diagram without the sequenceDiagram marker: %r",
            result.mermaid[:40],
        )
        raise InvalidModelOutputError(INVALID_MERMAID_MESSAGE)

    return result
