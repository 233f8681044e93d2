# This project was developed with assistance from AI tools.
"""Assistant request schemas (profile extraction, recommendations, research)."""

from typing import Any

from pydantic import BaseModel, Field

from .conversation import ConversationMessage


class ExtractProfileRequest(BaseModel):
    """Conversation to mine for a client profile."""

    messages: list[ConversationMessage] = Field(min_length=1)
    client_id: int | None = Field(
        default=None,
        description="When set, the extracted fields are written to this client.",
    )


class RecommendCarriersRequest(BaseModel):
    """Client profile to rank carriers for (``risk_profile`` selects candidates)."""

    profile: dict[str, Any]


class ResearchCompanyRequest(BaseModel):
    company_name: str = Field(min_length=1)


class RiskProfileQuery(BaseModel):
    """Carrier match criteria. Extra keys are accepted and ignored by the filter."""

    model_config = {"extra": "allow"}

    industry: str | None = None
    size: int | None = Field(default=None, ge=0)
