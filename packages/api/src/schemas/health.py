# This project was developed with assistance from AI tools.
"""Health check response schema."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Status of one application component."""

    name: str
    status: str
    message: str
    version: str | None = None
