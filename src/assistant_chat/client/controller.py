import logging
from typing import List, Optional

from assistant_chat.client.storage import InMemoryStore, KeyValueStore
from assistant_chat.client.transport import Responder
from assistant_chat.generator.threads import is_valid_thread_id, normalize_thread_id
from assistant_chat.schemas.chat import ConversationState, Message

logger = logging.getLogger(__name__)

THREAD_ID_STORAGE_KEY = "chat_thread_id"
FALLBACK_REPLY = "Something went wrong. Starting a new conversation."


class ConversationController:
    """
    Client-side conversation state and the submission lifecycle.

    Holds the message history, pending input, loading flag and the current
    thread id. The thread id is mirrored into `store` on every change: a valid
    id is written under THREAD_ID_STORAGE_KEY, anything else removes the key.
    One controller serves one conversation; concurrent `submit()` calls are not
    guarded against and may interleave their updates.
    """

    def __init__(self, responder: Responder, store: Optional[KeyValueStore] = None):
        self.responder = responder
        self.store = store if store is not None else InMemoryStore()

        self.messages: List[Message] = []
        self.input: str = ""
        self.is_loading: bool = False
        self.last_assistant_message: Optional[Message] = None

        stored_thread_id = self.store.get(THREAD_ID_STORAGE_KEY)
        logger.info(f"Initializing threadId from store: {stored_thread_id}")
        self._thread_id: Optional[str] = None
        self.thread_id = stored_thread_id

    @property
    def thread_id(self) -> Optional[str]:
        return self._thread_id

    @thread_id.setter
    def thread_id(self, value: Optional[str]) -> None:
        self._thread_id = normalize_thread_id(value)
        if self._thread_id:
            self.store.set(THREAD_ID_STORAGE_KEY, self._thread_id)
            logger.debug(f"Stored threadId: {self._thread_id}")
        else:
            self.store.remove(THREAD_ID_STORAGE_KEY)
            logger.debug("Removed threadId from store")

    @property
    def state(self) -> ConversationState:
        return ConversationState(
            messages=list(self.messages),
            input=self.input,
            is_loading=self.is_loading,
            thread_id=self.thread_id,
            last_assistant_message=self.last_assistant_message,
        )

    def change_input(self, text: str) -> None:
        self.input = text

    async def submit(self) -> None:
        content = self.input.strip()
        if not content:
            return

        current_thread_id = self.thread_id if is_valid_thread_id(self.thread_id) else None
        logger.info(f"Starting chat submission with threadId: {current_thread_id}")

        user_message = Message(role="user", content=content)
        updated_messages = [*self.messages, user_message]
        self.messages = updated_messages
        self.input = ""
        self.is_loading = True

        try:
            result = await self.responder.respond(updated_messages, current_thread_id)

            if is_valid_thread_id(result.thread_id):
                logger.info(f"Updating threadId from {current_thread_id} to {result.thread_id}")
            else:
                logger.warning(f"Invalid or missing threadId in response: {result.thread_id}")
            self.thread_id = result.thread_id

            if result.text:
                assistant_message = Message(role="assistant", content=result.text)
                self.messages = [*self.messages, assistant_message]
                self.last_assistant_message = assistant_message
            else:
                logger.warning("Received empty response text")
        except Exception as e:
            logger.error(f"Chat submission error (threadId: {current_thread_id}): {e}", exc_info=True)
            self.thread_id = None
            self.messages = [*self.messages, Message(role="assistant", content=FALLBACK_REPLY)]
        finally:
            self.is_loading = False

    def stop(self) -> None:
        """Clears the loading flag. The in-flight request is not cancelled."""
        self.is_loading = False

    def reset(self) -> None:
        logger.info(f"Resetting chat, clearing threadId: {self.thread_id}")
        self.messages = []
        self.thread_id = None
        self.last_assistant_message = None
