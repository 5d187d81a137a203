from typing import Dict, List, Optional

import requests

from payflow.inference.base import LLMClient
from payflow.ir.errors import UpstreamError
from payflow.utils.log import get_logger


logger = get_logger(__name__)


class ChatCompletionsClient(LLMClient):
    """
    Minimal client for an OpenAI-compatible /chat/completions endpoint.

    Always asks for JSON mode. Returns the raw message content; parsing is
    left to the caller.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        temperature: float = 0.2,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, messages: List[Dict]) -> str:
        url = f"{self.base_url}/chat/completions"

        logger.info("Calling %s (model=%s)", url, self.model)
        response = self.session.post(
            url,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": self.model,
                "temperature": self.temperature,
                "messages": messages,
                "response_format": {"type": "json_object"},
            },
            timeout=self.timeout,
        )

        if not response.ok:
            logger.error(
                "Upstream returned %s: %s", response.status_code, response.text[:500]
            )
            raise UpstreamError(response.status_code, response.text)

        data = response.json()
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None

        return content if content is not None else "{}"
