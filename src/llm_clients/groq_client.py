"""
Groq client implementation.
Talks to the OpenAI-compatible chat completions endpoint over plain HTTPS.
"""

from typing import Optional
import httpx
from pydantic import ValidationError

from .base_client import BaseLLMClient
from config.config import GROQ_CHAT_COMPLETIONS_URL, ModelConfig, groq_config
from src.exceptions import (
    DecodingError,
    EmptyChoicesError,
    EncodingError,
    StatusError,
    TransportError
)
from src.models.schemas import (
    BackendSource,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage
)


class GroqClient(BaseLLMClient):
    """Client for Groq's chat completions API (Backend B)."""

    source = BackendSource.GROQ

    def __init__(
        self,
        config: Optional[ModelConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        url: str = GROQ_CHAT_COMPLETIONS_URL,
        timeout: float = 120.0
    ):
        """
        Initialize the Groq client.

        Args:
            config: Model configuration, defaults to the environment settings
            http_client: Shared AsyncClient; a fresh one is opened per call if None
            url: Chat completions endpoint
            timeout: Request timeout in seconds for per-call clients
        """
        config = config or groq_config()
        super().__init__(config)

        self.http_client = http_client
        self.url = url
        self.timeout = timeout

    def _build_body(
        self,
        prompt: str,
        system_prompt: Optional[str],
        temperature: Optional[float],
        max_tokens: Optional[int]
    ) -> str:
        messages = []

        if system_prompt:
            messages.append(ChatMessage(role="system", content=system_prompt))

        messages.append(ChatMessage(role="user", content=prompt))

        request = ChatCompletionRequest(
            model=self.model_id,
            messages=messages,
            temperature=temperature if temperature is not None else self.config.temperature,
            max_tokens=max_tokens or self.config.max_tokens
        )
        return request.model_dump_json(exclude_none=True)

    async def _post(self, client: httpx.AsyncClient, body: str) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json"
        }
        try:
            return await client.post(self.url, content=body, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"failed to send request: {e}", source=self.name) from e

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate a response using a Groq-hosted model.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt
            temperature: Override temperature
            max_tokens: Override max tokens

        Returns:
            Content of the first completion choice

        Raises:
            EncodingError: If the request body cannot be serialized
            TransportError: If the request cannot be delivered
            StatusError: If the response status is not 200
            DecodingError: If the response body is malformed
            EmptyChoicesError: If no choices are returned
        """
        try:
            body = self._build_body(prompt, system_prompt, temperature, max_tokens)
        except (ValidationError, ValueError, TypeError) as e:
            raise EncodingError(f"failed to marshal request: {e}", source=self.name) from e

        if self.http_client is not None:
            response = await self._post(self.http_client, body)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._post(client, body)

        if response.status_code != httpx.codes.OK:
            raise StatusError(response.status_code, source=self.name)

        try:
            completion = ChatCompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodingError(f"failed to decode response: {e}", source=self.name) from e

        if not completion.choices:
            raise EmptyChoicesError(source=self.name)

        return completion.choices[0].message.content or ""
