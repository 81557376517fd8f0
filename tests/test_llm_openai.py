from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from gpt_studio.core.errors import UnexpectedResponse
from gpt_studio.core.models import LLMSettings
from gpt_studio.core.services.llm_openai import OpenAILLMClient

SETTINGS = LLMSettings(model="openai/gpt-5", temperature=0.3, max_tokens=1500)
REQUEST = httpx.Request("POST", "https://models.example/inference/chat/completions")


def _completion(content="hello", usage=True):
    return SimpleNamespace(
        model="openai/gpt-5",
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=12, completion_tokens=7) if usage else None,
    )


@pytest.fixture
def client():
    c = OpenAILLMClient("token", base_url="https://models.example/inference")
    c.client = MagicMock()
    return c


def test_returns_first_choice_text_and_usage(client):
    client.client.chat.completions.create.return_value = _completion("hello")
    messages = [{"role": "user", "content": "hi"}]

    text, meta = client.chat(messages, SETTINGS, system="be brief")

    assert text == "hello"
    assert meta["tokens_in"] == 12 and meta["tokens_out"] == 7
    assert set(meta) == {"model", "tokens_in", "tokens_out"}
    kwargs = client.client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "openai/gpt-5"
    assert kwargs["temperature"] == 0.3
    assert kwargs["max_tokens"] == 1500
    assert kwargs["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hi"},
    ]


def test_missing_usage_counts_zero(client):
    client.client.chat.completions.create.return_value = _completion(usage=False)
    _, meta = client.chat([], SETTINGS)
    assert meta["tokens_in"] == 0 and meta["tokens_out"] == 0


def test_status_error_is_wrapped_without_retry(client):
    response = httpx.Response(401, request=REQUEST)
    client.client.chat.completions.create.side_effect = openai.AuthenticationError(
        "bad credentials", response=response, body=None
    )

    with pytest.raises(UnexpectedResponse) as info:
        client.chat([], SETTINGS)

    assert info.value.status_code == 401
    assert client.client.chat.completions.create.call_count == 1


def test_connection_error_is_wrapped(client):
    client.client.chat.completions.create.side_effect = openai.APIConnectionError(
        request=REQUEST
    )
    with pytest.raises(UnexpectedResponse):
        client.chat([], SETTINGS)


@pytest.mark.parametrize(
    "payload",
    [
        SimpleNamespace(model="m", choices=[], usage=None),
        SimpleNamespace(model="m", choices=None, usage=None),
        _completion(content=None),
    ],
)
def test_unusable_payload_is_unexpected(client, payload):
    client.client.chat.completions.create.return_value = payload
    with pytest.raises(UnexpectedResponse):
        client.chat([], SETTINGS)


def test_missing_token_does_not_fail_up_front():
    c = OpenAILLMClient("", base_url="https://models.example/inference")
    assert c.api_key
