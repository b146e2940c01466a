import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from assistant_chat.generator.errors import (
    MessageRetrievalFailed,
    MessageSubmissionFailed,
    NoTextResponse,
    NoUserMessage,
    RunCreationFailed,
    UnexpectedRunStatus,
)
from assistant_chat.generator.polling import wait_for_run
from assistant_chat.generator.threads import resolve_thread
from assistant_chat.schemas.chat import GenerationResult, Message

logger = logging.getLogger(__name__)

# Function to truncate message content for logs
def truncate_content(content: str, max_len: int = 100) -> str:
    return content[:max_len] + "..." if len(content) > max_len else content


def last_user_message(messages: Sequence[Message]) -> Message:
    """Returns the last message with role 'user' by position."""
    for message in reversed(messages):
        if message.role == "user":
            return message
    raise NoUserMessage()


def extract_reply_text(thread_messages: Sequence[Any]) -> str:
    """
    Finds the text of the most recent assistant message.
    `thread_messages` must be ordered newest first, as the service lists them.
    """
    assistant_message = next((m for m in thread_messages if m.role == "assistant"), None)
    if assistant_message is None:
        logger.error("No assistant message found in thread messages.")
        raise NoTextResponse()

    text_content = next((c for c in assistant_message.content if c.type == "text"), None)
    if text_content is None:
        logger.error(f"No valid text response found in: {assistant_message}")
        raise NoTextResponse()
    return text_content.text.value


class ResponseGenerator:
    """Produces one assistant reply per call against the OpenAI Assistants API."""

    def __init__(
        self,
        client,
        assistant_id: str,
        poll_interval: float = 1.0,
        max_poll_attempts: Optional[int] = None,
        thread_id_prefix: str | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.client = client
        self.assistant_id = assistant_id
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self.thread_id_prefix = thread_id_prefix
        self._sleep = sleep

    async def generate(self, messages: Sequence[Message], thread_id: Optional[str] = None) -> GenerationResult:
        logger.info(f"Starting generate with threadId={thread_id}, messageCount={len(messages)}")

        # --- STEP 1: Pick the message to send ---
        user_message = last_user_message(messages)

        # --- STEP 2: Resolve the thread (falls back to a new one) ---
        resolution = await resolve_thread(self.client, thread_id, self.thread_id_prefix)
        thread_id = resolution.thread_id

        # --- STEP 3: Append the user message ---
        logger.info(f"Adding message to thread {thread_id}: '{truncate_content(user_message.content)}'")
        try:
            await self.client.beta.threads.messages.create(
                thread_id,
                role="user",
                content=user_message.content,
            )
        except Exception as e:
            logger.error(f"Failed to add message to thread {thread_id}: {e}", exc_info=True)
            raise MessageSubmissionFailed() from e

        # --- STEP 4: Start a run ---
        logger.info(f"Creating run for thread: {thread_id}")
        try:
            run = await self.client.beta.threads.runs.create(thread_id, assistant_id=self.assistant_id)
        except Exception as e:
            logger.error(f"Failed to create run for thread {thread_id}: {e}", exc_info=True)
            raise RunCreationFailed() from e
        logger.info(f"Run created: runId={run.id}, status={run.status}, threadId={thread_id}")

        # --- STEP 5: Poll until the run leaves the transient states ---
        run_id = run.id
        run = await wait_for_run(
            lambda: self.client.beta.threads.runs.retrieve(run_id, thread_id=thread_id),
            interval=self.poll_interval,
            max_attempts=self.max_poll_attempts,
            sleep=self._sleep,
        )
        if run.status != "completed":
            logger.error(f"Run ended with unexpected status: {run.status}")
            raise UnexpectedRunStatus(run.status)

        # --- STEP 6: Read the reply ---
        try:
            page = await self.client.beta.threads.messages.list(thread_id, order="desc")
        except Exception as e:
            logger.error(f"Failed to get messages for thread {thread_id}: {e}", exc_info=True)
            raise MessageRetrievalFailed() from e
        text = extract_reply_text(page.data)

        logger.info(f"Successfully generated response for thread: {thread_id}")
        return GenerationResult(text=text, thread_id=thread_id)
