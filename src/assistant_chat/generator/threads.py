import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from assistant_chat.config import settings
from assistant_chat.generator.errors import ThreadCreationFailed

logger = logging.getLogger(__name__)


def is_valid_thread_id(thread_id: Any, prefix: str | None = None) -> bool:
    """True when `thread_id` is a string carrying the service's thread prefix."""
    prefix = prefix or settings.thread_id_prefix
    return isinstance(thread_id, str) and thread_id.startswith(prefix)


def normalize_thread_id(thread_id: Any, prefix: str | None = None) -> Optional[str]:
    """Returns the id unchanged if it is well-formed, otherwise None."""
    return thread_id if is_valid_thread_id(thread_id, prefix) else None


class ThreadOrigin(str, Enum):
    REUSED = "reused"
    CREATED = "created"


@dataclass(frozen=True)
class ThreadResolution:
    thread_id: str
    origin: ThreadOrigin

    @property
    def reused(self) -> bool:
        return self.origin is ThreadOrigin.REUSED


async def _create_thread(client) -> ThreadResolution:
    try:
        thread = await client.beta.threads.create()
    except Exception as e:
        logger.error(f"Thread creation failed: {e}", exc_info=True)
        raise ThreadCreationFailed() from e
    logger.info(f"Created new thread: {thread.id}")
    return ThreadResolution(thread_id=thread.id, origin=ThreadOrigin.CREATED)


async def resolve_thread(client, thread_id: Optional[str], prefix: str | None = None) -> ThreadResolution:
    """
    Resolves the thread a message should be appended to.

    A well-formed id is retrieved from the service and reused. A missing or
    malformed id, or any failure while retrieving, results in a new thread.
    Only a failure to create the new thread is raised.
    """
    if thread_id and not is_valid_thread_id(thread_id, prefix):
        logger.warning(f"Invalid threadId format: {thread_id}")
        thread_id = None

    if not thread_id:
        logger.info("Creating new thread")
        return await _create_thread(client)

    try:
        logger.info(f"Attempting to retrieve existing thread: {thread_id}")
        thread = await client.beta.threads.retrieve(thread_id)
    except Exception as e:
        logger.error(f"Thread retrieval failed for {thread_id}, creating a new one: {e}", exc_info=True)
        return await _create_thread(client)

    logger.info(f"Successfully retrieved thread: {thread.id}")
    return ThreadResolution(thread_id=thread.id, origin=ThreadOrigin.REUSED)
