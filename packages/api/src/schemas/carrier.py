# This project was developed with assistance from AI tools.
"""Carrier request/response schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CarrierCreate(BaseModel):
    """Register a new insurance carrier."""

    name: str = Field(min_length=1)
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    specialties: list[str] | None = None
    risk_appetite: dict[str, Any] | None = Field(
        default=None,
        description="Conventional keys: industries (list), company_size {min, max}.",
    )
    min_premium: int | None = Field(default=None, ge=0)
    max_premium: int | None = Field(default=None, ge=0)
    regions: list[str] | None = None
    business_types: list[str] | None = None


class CarrierUpdate(BaseModel):
    """Partial update to an existing carrier."""

    name: str | None = Field(default=None, min_length=1)
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    specialties: list[str] | None = None
    risk_appetite: dict[str, Any] | None = None
    min_premium: int | None = Field(default=None, ge=0)
    max_premium: int | None = Field(default=None, ge=0)
    regions: list[str] | None = None
    business_types: list[str] | None = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be null")
        return value


class CarrierResponse(BaseModel):
    """Single carrier."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    website: str | None = None
    phone: str | None = None
    email: str | None = None
    specialties: list[str] | None = None
    risk_appetite: dict[str, Any] | None = None
    min_premium: int | None = None
    max_premium: int | None = None
    regions: list[str] | None = None
    business_types: list[str] | None = None
