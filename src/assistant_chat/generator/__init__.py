"""
Server-side reply generation against the OpenAI Assistants API.
"""

from .errors import (
    GenerationError,
    MessageRetrievalFailed,
    MessageSubmissionFailed,
    NoTextResponse,
    NoUserMessage,
    RunCreationFailed,
    RunPollTimeout,
    StatusPollFailed,
    ThreadCreationFailed,
    UnexpectedRunStatus,
)
from .service import ResponseGenerator
from .threads import ThreadOrigin, ThreadResolution, is_valid_thread_id, resolve_thread

__all__ = [
    "GenerationError",
    "MessageRetrievalFailed",
    "MessageSubmissionFailed",
    "NoTextResponse",
    "NoUserMessage",
    "RunCreationFailed",
    "RunPollTimeout",
    "StatusPollFailed",
    "ThreadCreationFailed",
    "UnexpectedRunStatus",
    "ResponseGenerator",
    "ThreadOrigin",
    "ThreadResolution",
    "is_valid_thread_id",
    "resolve_thread",
]
