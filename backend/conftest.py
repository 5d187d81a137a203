"""
Shared fixtures: the FastAPI app and a scripted stand-in for the LLM client.
"""

import json
from typing import Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from payflow import config
from payflow.inference.base import LLMClient
from payflow.inference.config import get_llm_client
from payflow.main import create_app


class FakeLLMClient(LLMClient):
    """Returns canned content (or raises) and records every call."""

    def __init__(self, content: str = "{}", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[List[Dict]] = []

    def generate(self, messages: List[Dict]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.content


def completion_payload(content: str) -> Dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def upstream_response(status_code: int = 200, payload=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text or json.dumps(payload or {})
    response.json.return_value = payload
    return response


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def app(fake_llm, monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-test")
    application = create_app()
    application.dependency_overrides[get_llm_client] = lambda: fake_llm
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
