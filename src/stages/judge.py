"""
Equivalence judgement.
Asks Backend A whether two answers convey the same meaning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.exceptions import BackendError, ComparisonError

if TYPE_CHECKING:
    from src.llm_clients.base_client import BaseLLMClient


class EquivalenceJudge:
    """Classifies two free-text answers as semantically equivalent or not."""

    COMPARISON_PROMPT_TEMPLATE = """Compare these two responses and determine if they convey the same meaning.
Only respond with "true" if they are semantically equivalent, or "false" if they differ significantly in meaning.

Response 1:
{response_1}

Response 2:
{response_2}"""

    def __init__(self, client: BaseLLMClient):
        """
        Initialize the judge.

        Args:
            client: Backend whose generation path answers the comparison
        """
        self.client = client

    def build_prompt(self, text_a: str, text_b: str) -> str:
        """Embed both answers verbatim in the comparison prompt."""
        return self.COMPARISON_PROMPT_TEMPLATE.format(
            response_1=text_a,
            response_2=text_b
        )

    @staticmethod
    def parse_verdict(verdict: str) -> bool:
        """
        Interpret the judge's reply.

        Only a reply that is exactly "true" after trimming and lowercasing
        counts as equivalent. Anything else, including "True." or a verbose
        explanation, is a negative verdict.
        """
        return verdict.strip().lower() == "true"

    async def judge(self, text_a: str, text_b: str) -> bool:
        """
        Decide whether two answers are semantically equivalent.

        Args:
            text_a: Answer content from Backend A
            text_b: Answer content from Backend B

        Returns:
            True if the backend replied "true"

        Raises:
            ComparisonError: If the underlying generation call fails
        """
        try:
            verdict = await self.client.generate(self.build_prompt(text_a, text_b))
        except BackendError as e:
            raise ComparisonError(e) from e

        return self.parse_verdict(verdict)
