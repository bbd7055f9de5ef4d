"""Data models for the conversation.

Hides the internal representation of chat messages and change notifications.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7


class MessageRole(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"
    ERROR = "error"


class Message(BaseModel):
    """One conversation turn. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: str(uuid7()),
        description="Time-ordered unique identifier"
    )
    role: MessageRole = Field(description="Role of the message: 'user', 'assistant', or 'error'")
    content: str = Field(min_length=1, description="Display text")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_error(self) -> bool:
        return self.role is MessageRole.ERROR


@dataclass(frozen=True)
class StoreChange:
    """Notification sent to store listeners after every append."""

    message: Message
    busy: bool
