"""
Prompt shaping applied to every question before it reaches a backend.
"""


class PromptEnhancer:
    """Decorates raw questions with multiple-choice analysis instructions."""

    ENHANCED_PROMPT_TEMPLATE = """If this is a multiple choice question, please:
1. Analyze each option carefully
2. Provide a clear "Yes" or "No" for each option
3. Explain the reasoning for each option
4. At the end, summarize which options are correct

Here's the question:
{question}"""

    def enhance(self, question: str) -> str:
        """
        Wrap a question in the fixed instructional template.

        Args:
            question: The raw user question

        Returns:
            The decorated prompt, containing the question verbatim
        """
        return self.ENHANCED_PROMPT_TEMPLATE.format(question=question)


_ENHANCER = PromptEnhancer()


def enhance_prompt(question: str) -> str:
    """Module-level shortcut for PromptEnhancer().enhance."""
    return _ENHANCER.enhance(question)
