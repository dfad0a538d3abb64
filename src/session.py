"""
Interactive console session.
Reads multi-line questions, hands them to the orchestrator and prints results.
"""

import asyncio
import threading
from enum import Enum
from typing import Callable, List, Optional, TextIO

from src.exceptions import SessionCancelled
from src.orchestrator import ConsensusOrchestrator


EXIT_COMMAND = "exit"

BANNER = (
    "Interactive AI Question Answering System\n"
    "Enter your questions (type 'exit' to quit)\n"
    "Type your question and press Ctrl+D (Unix) or Ctrl+Z (Windows) on a new line to finish\n"
    "----------------------------------------"
)


class SessionState(str, Enum):
    """Lifecycle of the interactive session."""
    WAITING_FOR_QUESTION = "waiting_for_question"
    ACCUMULATING_LINES = "accumulating_lines"
    EXIT_REQUESTED = "exit_requested"
    QUESTION_READY = "question_ready"
    PROCESSING = "processing"
    STOPPED = "stopped"


class ConsoleReader:
    """
    Line reader over an explicitly provided text stream.

    A daemon thread performs the blocking reads and feeds an asyncio queue,
    so a pending read never keeps the process alive during shutdown. An
    empty string marks end-of-input. Interactive streams keep reading after
    end-of-input so the user can type the next question; once a
    non-interactive stream is exhausted every later read returns "" at once.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.interactive = self._is_interactive(stream)
        self._queue: Optional[asyncio.Queue] = None
        self._thread: Optional[threading.Thread] = None
        self._eof = False

    @staticmethod
    def _is_interactive(stream: TextIO) -> bool:
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def _start(self):
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()

        def pump():
            while True:
                line = self.stream.readline()
                loop.call_soon_threadsafe(queue.put_nowait, line)
                if line == "" and not self.interactive:
                    break

        self._queue = queue
        self._thread = threading.Thread(target=pump, name="console-reader", daemon=True)
        self._thread.start()

    async def readline(self) -> str:
        """Return the next line, or "" at end-of-input."""
        if self._eof:
            return ""
        if self._queue is None:
            self._start()

        line = await self._queue.get()
        if line == "" and not self.interactive:
            self._eof = True
        return line


class InteractiveSession:
    """Console loop driving the consensus orchestrator one question at a time."""

    def __init__(
        self,
        orchestrator: ConsensusOrchestrator,
        reader: ConsoleReader,
        output: Callable[[str], None] = print,
        cancel_event: Optional[asyncio.Event] = None
    ):
        """
        Initialize the session.

        Args:
            orchestrator: Handles each question
            reader: Source of console lines
            output: Sink for user-facing text
            cancel_event: Shared cancellation token set on interrupt
        """
        self.orchestrator = orchestrator
        self.reader = reader
        self.output = output
        self.cancel_event = cancel_event or asyncio.Event()
        self.state = SessionState.WAITING_FOR_QUESTION

    async def read_question(self) -> Optional[str]:
        """
        Accumulate lines until end-of-input.

        Returns:
            The trimmed question text (possibly empty), or None if the user
            typed the exit command or non-interactive input is exhausted
        """
        self.state = SessionState.ACCUMULATING_LINES
        lines: List[str] = []

        while True:
            line = await self.reader.readline()
            if line == "":
                break

            if line.strip().lower() == EXIT_COMMAND:
                self.state = SessionState.EXIT_REQUESTED
                return None

            lines.append(line)

        if not lines and not self.reader.interactive:
            self.state = SessionState.EXIT_REQUESTED
            return None

        self.state = SessionState.QUESTION_READY
        return "".join(lines).strip()

    async def process(self, question: str):
        """Run one question through the orchestrator and print the outcome."""
        self.state = SessionState.PROCESSING
        result = await self.orchestrator.run(question, cancel_event=self.cancel_event)
        self.output(f"\nResponse:\n{result.render()}")

    async def run(self):
        """Prompt for questions until exit, end of input or cancellation."""
        self.output(BANNER)

        try:
            while not self.cancel_event.is_set():
                self.state = SessionState.WAITING_FOR_QUESTION
                self.output("\nEnter your question:")

                question = await self.read_question()
                if question is None:
                    self.output("Goodbye!")
                    break

                # Blank input goes straight back to waiting
                if not question:
                    continue

                try:
                    await self.process(question)
                except SessionCancelled:
                    raise
                except Exception as e:
                    self.output(f"Error processing question: {e}")
        except SessionCancelled:
            pass
        finally:
            self.state = SessionState.STOPPED
