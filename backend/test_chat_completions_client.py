from unittest.mock import MagicMock

import pytest

from conftest import completion_payload, upstream_response
from payflow import config
from payflow.inference.chat_completions_client import ChatCompletionsClient
from payflow.inference.config import get_llm_client, has_api_key
from payflow.ir.errors import MissingAPIKeyError, UpstreamError

MESSAGES = [{"role": "user", "content": "hi"}]


def make_client(response, **kwargs):
    session = MagicMock()
    session.post.return_value = response
    client = ChatCompletionsClient(
        base_url="https://llm.example/v1/",
        api_key="sk-test",
        model="gpt-4o-mini",
        session=session,
        **kwargs,
    )
    return client, session


def test_request_shape():
    client, session = make_client(upstream_response(200, payload=completion_payload("{}")))

    client.generate(MESSAGES)

    args, kwargs = session.post.call_args
    assert args[0] == "https://llm.example/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"] == {
        "model": "gpt-4o-mini",
        "temperature": 0.2,
        "messages": MESSAGES,
        "response_format": {"type": "json_object"},
    }
    assert kwargs["timeout"] is None


def test_timeout_is_forwarded_when_configured():
    client, session = make_client(
        upstream_response(200, payload=completion_payload("{}")), timeout=30.0
    )

    client.generate(MESSAGES)

    assert session.post.call_args.kwargs["timeout"] == 30.0


def test_returns_message_content_verbatim():
    client, _ = make_client(upstream_response(200, payload=completion_payload('{"a": 1}')))

    assert client.generate(MESSAGES) == '{"a": 1}'


@pytest.mark.parametrize(
    "payload",
    [{}, {"choices": []}, {"choices": [{}]}, {"choices": [{"message": {"content": None}}]}],
)
def test_missing_content_defaults_to_empty_object(payload):
    client, _ = make_client(upstream_response(200, payload=payload))

    assert client.generate(MESSAGES) == "{}"


def test_non_success_raises_upstream_error():
    client, _ = make_client(upstream_response(401, text="Incorrect API key provided"))

    with pytest.raises(UpstreamError) as excinfo:
        client.generate(MESSAGES)

    assert excinfo.value.upstream_status == 401
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "OpenAI error (401): Incorrect API key provided"


def test_get_llm_client_requires_a_key(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "")

    assert has_api_key() is False
    with pytest.raises(MissingAPIKeyError):
        get_llm_client()


def test_get_llm_client_uses_configuration(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", "sk-live")
    monkeypatch.setattr(config, "OPENAI_MODEL", "gpt-4o")
    monkeypatch.setattr(config, "OPENAI_BASE_URL", "https://proxy.internal/v1")

    client = get_llm_client()

    assert client.api_key == "sk-live"
    assert client.model == "gpt-4o"
    assert client.base_url == "https://proxy.internal/v1"
    assert client.temperature == config.LLM_TEMPERATURE
