# This project was developed with assistance from AI tools.
"""
Domain enums shared by the SQLAlchemy models (db package)
and the Pydantic schemas (api package).
"""

import enum


class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"


class PolicyStatus(str, enum.Enum):
    """Conventional policy statuses. Stored as free text; not enforced."""

    ACTIVE = "active"
    PENDING = "pending"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
