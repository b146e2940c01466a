import uuid
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


def new_message_id() -> str:
    return str(uuid.uuid4())


class Message(BaseModel):
    """A single chat message. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id)
    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request body for the chat endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    messages: List[Message]
    thread_id: Optional[str] = Field(default=None, alias="threadId")


class GenerationResult(BaseModel):
    text: str
    thread_id: Optional[str] = None # Absent only when a transport did not report one


class ConversationState(BaseModel):
    """Snapshot of a conversation controller."""
    messages: List[Message] = Field(default_factory=list)
    input: str = ""
    is_loading: bool = False
    thread_id: Optional[str] = None
    last_assistant_message: Optional[Message] = None
