# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db_service
from .enums import MessageRole, PolicyStatus
from .models import (
    Carrier,
    ChatMessage,
    Client,
    ClientRecord,
    CoverType,
    Policy,
    RecordType,
)

__all__ = [
    "Base",
    "DatabaseService",
    "get_db_service",
    "__version__",
    # Enums
    "MessageRole",
    "PolicyStatus",
    # Models
    "Carrier",
    "ChatMessage",
    "Client",
    "ClientRecord",
    "CoverType",
    "Policy",
    "RecordType",
]
