"""LLM Client implementations for the two backends."""

from .base_client import BaseLLMClient
from .google_client import GoogleClient
from .groq_client import GroqClient

__all__ = [
    "BaseLLMClient",
    "GoogleClient",
    "GroqClient"
]
