import logging
from typing import Optional, Protocol, Sequence

import httpx

from assistant_chat.generator import ResponseGenerator
from assistant_chat.schemas.chat import ChatRequest, GenerationResult, Message

logger = logging.getLogger(__name__)

THREAD_ID_HEADER = "X-Thread-Id"


class TransportError(Exception):
    """Raised when the chat endpoint cannot be used for a reply."""


class Responder(Protocol):
    async def respond(self, messages: Sequence[Message], thread_id: Optional[str]) -> GenerationResult:
        ...


class DirectResponder:
    """Calls the response generator in-process."""

    def __init__(self, generator: ResponseGenerator):
        self.generator = generator

    async def respond(self, messages: Sequence[Message], thread_id: Optional[str]) -> GenerationResult:
        return await self.generator.generate(list(messages), thread_id)


class HttpResponder:
    """
    Posts the conversation to the chat endpoint.

    The reply text is read from the streamed body and the thread id from the
    X-Thread-Id header. Any non-success status is a TransportError regardless
    of what the body says.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = "/api/chat"):
        self.client = client
        self.path = path

    async def respond(self, messages: Sequence[Message], thread_id: Optional[str]) -> GenerationResult:
        payload = ChatRequest(messages=list(messages), thread_id=thread_id)
        logger.info(f"Making API request with threadId={thread_id}, messageCount={len(payload.messages)}")

        async with self.client.stream(
            "POST",
            self.path,
            json=payload.model_dump(mode="json", by_alias=True),
        ) as response:
            if not response.is_success:
                await response.aread()
                try:
                    error_data = response.json()
                except ValueError:
                    error_data = {}
                logger.error(
                    f"API request failed: status={response.status_code}, "
                    f"reason={response.reason_phrase}, errorData={error_data}"
                )
                raise TransportError(f"HTTP error! status: {response.status_code}")

            new_thread_id = response.headers.get(THREAD_ID_HEADER)
            logger.info(f"Received threadId from response: {new_thread_id}")

            chunks = []
            try:
                async for chunk in response.aiter_text():
                    chunks.append(chunk)
            except httpx.HTTPError as e:
                logger.error(f"No readable body in response: {e}")
                raise TransportError("No reader available") from e

        text = "".join(chunks)
        logger.info(f"Received response text length: {len(text)}")
        return GenerationResult(text=text, thread_id=new_thread_id)
