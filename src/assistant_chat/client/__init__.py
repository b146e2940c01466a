"""
Client-side conversation state, thread id persistence and reply transports.
"""

from .controller import FALLBACK_REPLY, THREAD_ID_STORAGE_KEY, ConversationController
from .factory import create_http_controller
from .storage import InMemoryStore, JsonFileStore, KeyValueStore
from .transport import DirectResponder, HttpResponder, Responder, TransportError

__all__ = [
    "FALLBACK_REPLY",
    "THREAD_ID_STORAGE_KEY",
    "ConversationController",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "DirectResponder",
    "HttpResponder",
    "Responder",
    "TransportError",
    "create_http_controller",
]
