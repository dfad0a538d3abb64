"""
Google Gemini client implementation using the google-genai SDK.
"""

from typing import Optional
from google import genai
from google.genai import types

from .base_client import BaseLLMClient
from config.config import ModelConfig, gemini_config
from src.exceptions import ClientInitError, GenerationError
from src.models.schemas import BackendSource


class GoogleClient(BaseLLMClient):
    """Client for Google's Gemini API (Backend A)."""

    source = BackendSource.GEMINI

    def __init__(self, config: Optional[ModelConfig] = None):
        """
        Initialize the Google Gemini client.

        The SDK session is opened on first use so that a bad credential
        surfaces as a per-call ClientInitError rather than a crash.

        Args:
            config: Model configuration, defaults to the environment settings
        """
        config = config or gemini_config()
        super().__init__(config)
        self.client: Optional[genai.Client] = None

    def _session(self) -> genai.Client:
        """Return the SDK client, creating it on first use."""
        if self.client is None:
            try:
                self.client = genai.Client(api_key=self.config.api_key)
            except Exception as e:
                raise ClientInitError(
                    f"failed to create {self.name} client: {e}",
                    source=self.name
                ) from e
        return self.client

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate a response using Gemini.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt
            temperature: Override temperature
            max_tokens: Override max tokens

        Returns:
            Text of the first part of the first candidate

        Raises:
            ClientInitError: If the SDK client cannot be created
            GenerationError: If the call fails or yields no text
        """
        client = self._session()

        # Only send a generation config when something is set
        settings = {
            "temperature": temperature if temperature is not None else self.config.temperature,
            "max_output_tokens": max_tokens or self.config.max_tokens,
            "system_instruction": system_prompt
        }
        settings = {key: value for key, value in settings.items() if value is not None}
        generation_config = types.GenerateContentConfig(**settings) if settings else None

        try:
            response = await client.aio.models.generate_content(
                model=self.model_id,
                contents=prompt,
                config=generation_config
            )
        except Exception as e:
            raise GenerationError(
                f"failed to generate {self.name} response: {e}",
                source=self.name
            ) from e

        return self._first_text(response)

    def _first_text(self, response: types.GenerateContentResponse) -> str:
        """Extract the first generated text part of the first candidate."""
        candidates = response.candidates or []
        content = candidates[0].content if candidates else None
        parts = (content.parts or []) if content else []
        text = parts[0].text if parts else None

        if text is None:
            raise GenerationError(
                f"{self.name} returned no usable content",
                source=self.name
            )
        return text
