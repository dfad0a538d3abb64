"""Prompt shaping and answer judgement stages."""

from .prompt_enhancer import PromptEnhancer, enhance_prompt
from .judge import EquivalenceJudge

__all__ = [
    "PromptEnhancer",
    "enhance_prompt",
    "EquivalenceJudge"
]
