from __future__ import annotations

import json
from collections.abc import AsyncIterator

import httpx
import pytest
from respx import MockRouter

from config.config import GROQ_CHAT_COMPLETIONS_URL, ModelConfig
from src.exceptions import (
    DecodingError,
    EmptyChoicesError,
    EncodingError,
    StatusError,
    TransportError,
)
from src.llm_clients.groq_client import GroqClient
from src.models.schemas import BackendSource

CONFIG = ModelConfig(name="Groq", api_key="groq-test-key", model_id="llama-3.3-70b-versatile")


def completion(*contents: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": c}} for c in contents]}


@pytest.fixture
async def groq_client() -> AsyncIterator[GroqClient]:
    """Groq client sharing a real httpx client for respx mocking."""
    async with httpx.AsyncClient() as http_client:
        yield GroqClient(CONFIG, http_client=http_client)


@pytest.mark.asyncio
async def test_fetch_posts_enhanced_prompt_with_bearer_token(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    route = respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json=completion("B) 4 is correct", "ignored"))
    )

    answer = await groq_client.fetch("2+2=? A) 3 B) 4")

    assert answer.source is BackendSource.GROQ
    assert answer.content == "B) 4 is correct"

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer groq-test-key"
    assert request.headers["Content-Type"] == "application/json"
    body = json.loads(request.content)
    assert body["model"] == "llama-3.3-70b-versatile"
    assert len(body["messages"]) == 1
    assert body["messages"][0]["role"] == "user"
    assert body["messages"][0]["content"].endswith("Here's the question:\n2+2=? A) 3 B) 4")
    assert "temperature" not in body
    assert "max_tokens" not in body


@pytest.mark.asyncio
async def test_generate_adds_system_message_and_overrides(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    route = respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json=completion("hi"))
    )

    await groq_client.generate("Hello", system_prompt="Be brief", temperature=0.0, max_tokens=100)

    body = json.loads(route.calls.last.request.content)
    assert body["messages"] == [
        {"role": "system", "content": "Be brief"},
        {"role": "user", "content": "Hello"},
    ]
    assert body["temperature"] == 0.0
    assert body["max_tokens"] == 100


@pytest.mark.asyncio
async def test_non_200_raises_status_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(429, json={"error": "rate limited"})
    )

    with pytest.raises(StatusError) as exc_info:
        await groq_client.generate("Hello")

    assert exc_info.value.status_code == 429
    assert str(exc_info.value) == "API request failed with status: 429"


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(side_effect=httpx.ConnectError("refused"))

    with pytest.raises(TransportError):
        await groq_client.generate("Hello")


@pytest.mark.asyncio
async def test_malformed_json_raises_decoding_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, content=b"<html>not json</html>")
    )

    with pytest.raises(DecodingError):
        await groq_client.generate("Hello")


@pytest.mark.asyncio
async def test_missing_choices_key_raises_empty_choices_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json={"id": "x"})
    )

    with pytest.raises(EmptyChoicesError, match="no response choices returned"):
        await groq_client.generate("Hello")


@pytest.mark.asyncio
async def test_reply_without_role_is_accepted(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json={"choices": [{"message": {"content": "hi"}}]})
    )

    assert await groq_client.generate("Hello") == "hi"


@pytest.mark.asyncio
async def test_wrongly_typed_choices_raise_decoding_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json={"choices": "not a list"})
    )

    with pytest.raises(DecodingError):
        await groq_client.generate("Hello")


@pytest.mark.asyncio
async def test_zero_choices_raises_empty_choices_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json={"choices": []})
    )

    with pytest.raises(EmptyChoicesError):
        await groq_client.generate("Hello")


@pytest.mark.asyncio
async def test_null_content_is_empty_string(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(
            200, json={"choices": [{"message": {"role": "assistant", "content": None}}]}
        )
    )

    assert await groq_client.generate("Hello") == ""


@pytest.mark.asyncio
async def test_unserializable_settings_raise_encoding_error(
    groq_client: GroqClient, respx_mock: MockRouter
) -> None:
    with pytest.raises(EncodingError):
        await groq_client.generate("Hello", temperature="very hot")  # type: ignore[arg-type]

    assert not respx_mock.calls


@pytest.mark.asyncio
async def test_opens_its_own_connection_without_shared_client(respx_mock: MockRouter) -> None:
    respx_mock.post(GROQ_CHAT_COMPLETIONS_URL).mock(
        return_value=httpx.Response(200, json=completion("standalone"))
    )

    client = GroqClient(CONFIG, timeout=5.0)

    assert await client.generate("Hello") == "standalone"
    assert client.http_client is None
