"""
Error taxonomy for the consensus system.

Every failure a backend call can produce derives from BackendError so the
orchestrator can recover from all of them in one place. Only CredentialError
is fatal, and only at start-up.
"""

from typing import Iterable, Optional


class ConsensusError(Exception):
    """Base class for all errors raised by this package."""


class CredentialError(ConsensusError):
    """Required API keys are missing from the environment."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            f"Please set {' and '.join(self.missing)} in .env file"
        )


class SessionCancelled(ConsensusError):
    """The shared cancellation token was set before work could start."""


class BackendError(ConsensusError):
    """A call to one of the remote LLM backends failed."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ClientInitError(BackendError):
    """The SDK session for a backend could not be created."""


class GenerationError(BackendError):
    """The remote generation call failed or returned no usable content."""


class ComparisonError(GenerationError):
    """The equivalence judgement call failed."""

    def __init__(self, cause: BackendError):
        super().__init__(
            f"failed to compare responses: {cause}",
            source=cause.source
        )
        self.cause = cause


class EncodingError(BackendError):
    """The request body could not be serialized."""


class TransportError(BackendError):
    """The request could not be sent or the connection failed."""


class StatusError(BackendError):
    """The backend answered with a non-200 HTTP status."""

    def __init__(self, status_code: int, source: Optional[str] = None):
        super().__init__(
            f"API request failed with status: {status_code}",
            source=source
        )
        self.status_code = status_code


class DecodingError(BackendError):
    """The response body was not the JSON document we expected."""


class EmptyChoicesError(BackendError):
    """The backend returned zero completion choices."""

    def __init__(self, source: Optional[str] = None):
        super().__init__("no response choices returned", source=source)
