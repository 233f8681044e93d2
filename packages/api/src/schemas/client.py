# This project was developed with assistance from AI tools.
"""Client request/response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClientCreate(BaseModel):
    """Create a client from the manual form, chat extraction, or research."""

    name: str = Field(min_length=1)
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    business_type: str | None = None
    annual_revenue: int | None = Field(default=None, ge=0)
    employees: int | None = Field(default=None, ge=0)
    risk_profile: dict[str, Any] | None = Field(
        default=None,
        description="Conventional keys: industry, hazards, safetyMeasures.",
    )


class ClientUpdate(BaseModel):
    """Partial update to an existing client."""

    name: str | None = Field(default=None, min_length=1)
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    business_type: str | None = None
    annual_revenue: int | None = Field(default=None, ge=0)
    employees: int | None = Field(default=None, ge=0)
    risk_profile: dict[str, Any] | None = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class ClientResponse(BaseModel):
    """Single client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    business_type: str | None = None
    annual_revenue: int | None = None
    employees: int | None = None
    risk_profile: dict[str, Any] | None = None
    created_at: datetime | None = None
