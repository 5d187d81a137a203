from payflow import config
from payflow.ir.errors import MissingAPIKeyError
from .chat_completions_client import ChatCompletionsClient


def has_api_key() -> bool:
    return bool(config.OPENAI_API_KEY)


def get_llm_client() -> ChatCompletionsClient:
    if not has_api_key():
        raise MissingAPIKeyError()

    return ChatCompletionsClient(
        base_url=config.OPENAI_BASE_URL,
        api_key=config.OPENAI_API_KEY,
        model=config.OPENAI_MODEL,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.OPENAI_TIMEOUT,
    )
