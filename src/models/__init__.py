"""Pydantic models for backend responses and consensus results."""

from .schemas import (
    BackendSource,
    AnsweredResponse,
    ChatMessage,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatResponseMessage,
    Succeeded,
    ExhaustedWithAnswers,
    ExhaustedNoAnswers,
    ConsensusResult
)

__all__ = [
    "BackendSource",
    "AnsweredResponse",
    "ChatMessage",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatResponseMessage",
    "Succeeded",
    "ExhaustedWithAnswers",
    "ExhaustedNoAnswers",
    "ConsensusResult"
]
