"""
Abstract base class for LLM clients.
Provides the single capability interface the orchestrator and judge rely on.
"""

from abc import ABC, abstractmethod
from typing import Optional

from config.config import ModelConfig
from src.models.schemas import AnsweredResponse, BackendSource
from src.stages.prompt_enhancer import enhance_prompt


class BaseLLMClient(ABC):
    """Abstract base class for LLM API clients."""

    source: BackendSource

    def __init__(self, config: ModelConfig):
        """
        Initialize the LLM client.

        Args:
            config: Model configuration including API key and settings
        """
        self.config = config
        self.name = config.name
        self.model_id = config.model_id

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate a text response from the LLM.

        Args:
            prompt: The user prompt/question
            system_prompt: Optional system prompt to set context
            temperature: Override default temperature
            max_tokens: Override default max tokens

        Returns:
            The generated text response

        Raises:
            BackendError: If the backend cannot produce a response
        """
        pass

    async def fetch(self, question: str) -> AnsweredResponse:
        """
        Answer a user question with the multiple-choice enhanced prompt.

        Args:
            question: The trimmed user question

        Returns:
            AnsweredResponse tagged with this client's source
        """
        content = await self.generate(enhance_prompt(question))
        return AnsweredResponse(source=self.source, content=content)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, model={self.model_id})"
