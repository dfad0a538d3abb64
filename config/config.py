"""
Configuration module for the Dual-LLM Consensus system.
Handles API keys, model settings, and system configuration.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from src.exceptions import CredentialError


GEMINI_KEY_ENV = "GEMINI_API_KEY"
GROQ_KEY_ENV = "GROQ_API_KEY"

GROQ_CHAT_COMPLETIONS_URL = "https://api.groq.com/openai/v1/chat/completions"


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for a specific LLM model."""
    name: str
    api_key: Optional[str]
    model_id: str
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


@dataclass(frozen=True)
class SystemConfig:
    """System-wide configuration settings."""
    # Timeout for API calls in seconds
    api_timeout: float = 120.0

    # Number of attempts to reach agreement between the two backends
    max_retries: int = 3


@dataclass(frozen=True)
class AppConfig:
    """Everything a session needs, loaded once at start-up."""
    gemini: ModelConfig
    groq: ModelConfig
    system: SystemConfig = field(default_factory=SystemConfig)

    @property
    def max_retries(self) -> int:
        return self.system.max_retries


def gemini_config() -> ModelConfig:
    """Backend A settings from the environment."""
    return ModelConfig(
        name="Gemini",
        api_key=os.getenv(GEMINI_KEY_ENV),
        model_id=os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    )


def groq_config() -> ModelConfig:
    """Backend B settings from the environment."""
    return ModelConfig(
        name="Groq",
        api_key=os.getenv(GROQ_KEY_ENV),
        model_id=os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    )


def system_config(max_retries: int = 3) -> SystemConfig:
    """System settings from the environment plus the CLI retry budget."""
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")
    return SystemConfig(
        api_timeout=float(os.getenv("API_TIMEOUT", "120")),
        max_retries=max_retries
    )


def validate_api_keys() -> dict[str, bool]:
    """Check which API keys are configured."""
    return {
        config.name.lower(): bool(config.api_key)
        for config in (gemini_config(), groq_config())
    }


def load_config(
    max_retries: int = 3,
    env_file: Optional[str] = ".env"
) -> AppConfig:
    """
    Load the immutable application configuration.

    Args:
        max_retries: Attempt budget for the retry orchestrator
        env_file: Optional .env file to load before reading the environment

    Returns:
        AppConfig with both backend credentials

    Raises:
        CredentialError: If either API key is missing
    """
    if env_file:
        load_dotenv(env_file)

    gemini = gemini_config()
    groq = groq_config()

    missing = [
        env_name
        for env_name, config in ((GEMINI_KEY_ENV, gemini), (GROQ_KEY_ENV, groq))
        if not config.api_key
    ]
    if missing:
        raise CredentialError(missing)

    return AppConfig(gemini=gemini, groq=groq, system=system_config(max_retries))
