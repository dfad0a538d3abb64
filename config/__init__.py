"""Configuration package for the Dual-LLM Consensus system."""

from .config import (
    ModelConfig,
    SystemConfig,
    AppConfig,
    GROQ_CHAT_COMPLETIONS_URL,
    gemini_config,
    groq_config,
    system_config,
    load_config,
    validate_api_keys
)

__all__ = [
    "ModelConfig",
    "SystemConfig",
    "AppConfig",
    "GROQ_CHAT_COMPLETIONS_URL",
    "gemini_config",
    "groq_config",
    "system_config",
    "load_config",
    "validate_api_keys"
]
