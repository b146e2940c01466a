import httpx

from assistant_chat.client.controller import ConversationController
from assistant_chat.client.storage import JsonFileStore, KeyValueStore
from assistant_chat.client.transport import HttpResponder
from assistant_chat.config import settings


def create_http_controller(
    client: httpx.AsyncClient | None = None,
    store: KeyValueStore | None = None,
) -> ConversationController:
    """
    Builds a controller that talks to the chat endpoint at settings.chat_api_url
    and keeps its thread id in the JSON file at settings.thread_store_path.
    """
    if client is None:
        # Runs can take a while to complete; the endpoint only answers once they do.
        client = httpx.AsyncClient(base_url=settings.chat_api_url, timeout=None)
    if store is None:
        store = JsonFileStore(settings.thread_store_path)
    return ConversationController(HttpResponder(client), store=store)
