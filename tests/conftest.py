from __future__ import annotations

from typing import List, Optional, Union

import pytest

from config.config import ModelConfig
from src.exceptions import BackendError
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import BackendSource


Scripted = Union[str, BackendError]


class FakeClient(BaseLLMClient):
    """Backend returning scripted replies in order, repeating the last one."""

    def __init__(self, source: BackendSource, replies: List[Scripted]):
        super().__init__(ModelConfig(name=source.value, api_key="fake", model_id="fake-model"))
        self.source = source
        self.replies = list(replies)
        self.prompts: List[str] = []

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> str:
        self.prompts.append(prompt)
        index = min(len(self.prompts), len(self.replies)) - 1
        reply = self.replies[index]
        if isinstance(reply, BackendError):
            raise reply
        return reply


@pytest.fixture(autouse=True)
def clear_backend_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GEMINI_API_KEY", "GROQ_API_KEY", "GEMINI_MODEL", "GROQ_MODEL", "API_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
