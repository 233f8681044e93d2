# This project was developed with assistance from AI tools.
"""Chat message schemas."""

from datetime import datetime

from db.enums import MessageRole
from pydantic import BaseModel, ConfigDict, Field


class ChatMessageCreate(BaseModel):
    """A message posted to the assistant chat."""

    model_config = ConfigDict(use_enum_values=True)

    client_id: int | None = None
    role: MessageRole = MessageRole.USER
    content: str = Field(min_length=1)


class ChatMessageResponse(BaseModel):
    """A stored chat message."""

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: int
    client_id: int | None = None
    role: MessageRole
    content: str
    timestamp: datetime | None = None


class ChatTurnResponse(BaseModel):
    """Result of posting a message: the stored message and, for user turns, the reply."""

    message: ChatMessageResponse
    reply: ChatMessageResponse | None = None
