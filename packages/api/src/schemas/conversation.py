# This project was developed with assistance from AI tools.
"""Conversation message schema shared by assistant requests."""

from pydantic import BaseModel, Field


class ConversationMessage(BaseModel):
    """A single message in conversation history."""

    role: str = Field(..., description="Message role: 'user' or 'assistant'")
    content: str = Field(..., description="Message text content")
