"""Data models for a chat conversation.

These models define the message log and the orchestration state the
controller mutates. Nothing here is persisted.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Author(str, Enum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Stable identity used for lookups")
    text: str = Field(description="Message body")
    author: Author = Field(description="Sender of the message")
    reply_to: UUID | None = Field(
        default=None,
        description="Id of the message this one quotes, if any"
    )
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_user(self) -> bool:
        return self.author == Author.USER


class ConversationState(BaseModel):
    """Complete in-memory state of one chat session.

    Owned exclusively by ConversationController; UI layers read it through
    subscriptions and never mutate it directly.
    """

    messages: list[Message] = Field(default_factory=list)
    draft_text: str = Field(default="", description="Not-yet-sent input text")
    is_awaiting_reply: bool = Field(
        default=False,
        description="Typing indicator flag, shared by all in-flight requests"
    )
    reply_target: UUID | None = Field(
        default=None,
        description="Id of the message the draft is replying to"
    )

    def index_of(self, message_id: UUID) -> int | None:
        """Return the position of a message, or None if it is not in the log."""
        for index, message in enumerate(self.messages):
            if message.id == message_id:
                return index
        return None

    def find(self, message_id: UUID) -> Message | None:
        index = self.index_of(message_id)
        return None if index is None else self.messages[index]

    @property
    def last_message(self) -> Message | None:
        return self.messages[-1] if self.messages else None
