"""
Pydantic models for backend responses, wire formats and consensus results.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

from src.exceptions import BackendError
from src.formatting import format_comparison


class BackendSource(str, Enum):
    """The two backends queried for every question."""
    GEMINI = "Gemini"
    GROQ = "Groq"


class AnsweredResponse(BaseModel):
    """A successful answer from one backend."""
    model_config = ConfigDict(frozen=True)

    source: BackendSource = Field(..., description="Backend that produced the answer")
    content: str = Field(..., description="Generated answer text")


# ============== Groq Chat Completions Wire Models ==============

class ChatMessage(BaseModel):
    """A single chat message."""
    role: str = Field(..., description="Message author role")
    content: Optional[str] = Field(default=None, description="Message text")


class ChatCompletionRequest(BaseModel):
    """Request body for an OpenAI-compatible chat completions endpoint."""
    model: str = Field(..., description="Model identifier")
    messages: List[ChatMessage] = Field(..., description="Conversation messages")
    temperature: Optional[float] = Field(default=None, description="Sampling temperature")
    max_tokens: Optional[int] = Field(default=None, description="Completion token limit")


class ChatResponseMessage(BaseModel):
    """A generated message as returned by the API."""
    role: Optional[str] = Field(default=None, description="Message author role")
    content: Optional[str] = Field(default=None, description="Message text")


class ChatChoice(BaseModel):
    """One completion choice."""
    message: ChatResponseMessage = Field(..., description="Generated message")


class ChatCompletionResponse(BaseModel):
    """Response body of a chat completions call."""
    choices: List[ChatChoice] = Field(default_factory=list, description="Completion choices")


# ============== Consensus Result Models ==============

class _ResultBase(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    attempts: int = Field(..., ge=0, description="Attempts executed before finishing")

    @property
    def agreed(self) -> bool:
        return False

    def render(self) -> str:
        raise NotImplementedError


class Succeeded(_ResultBase):
    """Both backends agreed; Backend A's answer is canonical."""
    answer: AnsweredResponse = Field(..., description="The canonical answer")

    @property
    def agreed(self) -> bool:
        return True

    def render(self) -> str:
        return self.answer.content


class ExhaustedWithAnswers(_ResultBase):
    """The budget ran out, but the final attempt produced two answers."""
    answer_a: AnsweredResponse = Field(..., description="Final attempt answer from Backend A")
    answer_b: AnsweredResponse = Field(..., description="Final attempt answer from Backend B")

    def render(self) -> str:
        return format_comparison(
            self.attempts,
            self.answer_a.source.value,
            self.answer_a.content,
            self.answer_b.source.value,
            self.answer_b.content
        )


class ExhaustedNoAnswers(_ResultBase):
    """The budget ran out without the final attempt producing two answers."""
    last_error_a: Optional[BackendError] = Field(default=None, description="Most recent Backend A error")
    last_error_b: Optional[BackendError] = Field(default=None, description="Most recent Backend B error")

    def render(self) -> str:
        return (
            f"failed to get responses after {self.attempts} attempts. "
            f"{BackendSource.GEMINI.value} error: {self.last_error_a}, "
            f"{BackendSource.GROQ.value} error: {self.last_error_b}"
        )


ConsensusResult = Union[Succeeded, ExhaustedWithAnswers, ExhaustedNoAnswers]
