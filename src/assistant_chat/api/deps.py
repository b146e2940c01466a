# src/assistant_chat/api/deps.py
import logging
from functools import lru_cache

from openai import AsyncOpenAI

from assistant_chat.config import settings
from assistant_chat.generator import ResponseGenerator

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def get_generator() -> ResponseGenerator:
    """Gets the response generator configured from settings."""
    logger.info(
        f"Initializing response generator (assistant: {settings.openai_assistant_id}, "
        f"api key set: {bool(settings.openai_api_key)})"
    )
    if not settings.openai_api_key or not settings.openai_assistant_id:
        logger.error("OPENAI_API_KEY or OPENAI_ASSISTANT_ID is missing.")
        raise RuntimeError("OpenAI configuration missing for response generator.")

    client = AsyncOpenAI(api_key=settings.openai_api_key)
    return ResponseGenerator(
        client,
        assistant_id=settings.openai_assistant_id,
        poll_interval=settings.poll_interval_seconds,
        max_poll_attempts=settings.max_poll_attempts,
        thread_id_prefix=settings.thread_id_prefix,
    )
