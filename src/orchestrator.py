"""
Retry Orchestrator for the Dual-LLM Consensus system.
Queries both backends, judges agreement and retries until they agree.
"""

import asyncio
from typing import Optional

from src.exceptions import BackendError, SessionCancelled
from src.llm_clients.base_client import BaseLLMClient
from src.models.schemas import (
    AnsweredResponse,
    ConsensusResult,
    ExhaustedNoAnswers,
    ExhaustedWithAnswers,
    Succeeded
)
from src.stages.judge import EquivalenceJudge


class ConsensusOrchestrator:
    """
    Coordinates one question through the consensus workflow.

    Workflow per attempt:
    1. Ask Backend A (primary)
    2. Ask Backend B (secondary)
    3. Judge whether both answers mean the same thing
    4. Stop on agreement, otherwise retry the identical requests

    Any backend failure is logged and consumes one attempt. After the
    budget is spent the last attempt's data decides the exhausted state.
    """

    def __init__(
        self,
        primary: BaseLLMClient,
        secondary: BaseLLMClient,
        judge: Optional[EquivalenceJudge] = None,
        max_retries: int = 3,
        verbose: bool = True
    ):
        """
        Initialize the orchestrator.

        Args:
            primary: Backend A client, also used for judging by default
            secondary: Backend B client
            judge: Equivalence judge, defaults to one backed by primary
            max_retries: Number of attempts before giving up
            verbose: Whether to print per-attempt log lines
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")

        self.primary = primary
        self.secondary = secondary
        self.judge = judge or EquivalenceJudge(primary)
        self.max_retries = max_retries
        self.verbose = verbose

    def _log(self, message: str):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"[Orchestrator] {message}")

    async def run(
        self,
        question: str,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ConsensusResult:
        """
        Run the retry loop for a single question.

        Args:
            question: The trimmed, non-empty user question
            cancel_event: Shared cancellation token; checked before each attempt

        Returns:
            Succeeded, ExhaustedWithAnswers or ExhaustedNoAnswers

        Raises:
            SessionCancelled: If cancel_event is set before an attempt starts
        """
        answer_a: Optional[AnsweredResponse] = None
        answer_b: Optional[AnsweredResponse] = None
        last_error_a: Optional[BackendError] = None
        last_error_b: Optional[BackendError] = None

        for attempt in range(self.max_retries):
            if cancel_event is not None and cancel_event.is_set():
                raise SessionCancelled(f"cancelled before attempt {attempt + 1}")

            # Only the current attempt's answers survive
            answer_a = answer_b = None

            try:
                answer_a = await self.primary.fetch(question)
            except BackendError as e:
                self._log(f"Attempt {attempt + 1}: {self.primary.name} API error: {e}")
                last_error_a = e
                continue

            try:
                answer_b = await self.secondary.fetch(question)
            except BackendError as e:
                self._log(f"Attempt {attempt + 1}: {self.secondary.name} API error: {e}")
                last_error_b = e
                continue

            try:
                similar = await self.judge.judge(answer_a.content, answer_b.content)
            except BackendError as e:
                self._log(f"Attempt {attempt + 1}: Comparison error: {e}")
                continue

            if similar:
                self._log(f"Attempt {attempt + 1}: Responses agree")
                return Succeeded(answer=answer_a, attempts=attempt + 1)

            self._log(f"Attempt {attempt + 1}: Responses differ, retrying...")

        if answer_a is not None and answer_b is not None:
            return ExhaustedWithAnswers(
                answer_a=answer_a,
                answer_b=answer_b,
                attempts=self.max_retries
            )

        return ExhaustedNoAnswers(
            last_error_a=last_error_a,
            last_error_b=last_error_b,
            attempts=self.max_retries
        )
