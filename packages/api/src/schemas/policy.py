# This project was developed with assistance from AI tools.
"""Policy request/response schemas."""

from datetime import datetime
from typing import Any

from db.enums import PolicyStatus
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class PolicyCreate(BaseModel):
    """Place a policy with a carrier for a client.

    ``client_id`` and ``carrier_id`` are not checked against existing rows.
    """

    client_id: int
    carrier_id: int
    policy_type: str = Field(min_length=1)
    start_date: datetime
    end_date: datetime
    premium: int | None = Field(default=None, ge=0)
    status: str = PolicyStatus.ACTIVE.value
    coverage_limits: dict[str, Any] | None = None


class PolicyUpdate(BaseModel):
    """Partial update to an existing policy."""

    carrier_id: int | None = None
    policy_type: str | None = Field(default=None, min_length=1)
    start_date: datetime | None = None
    end_date: datetime | None = None
    premium: int | None = Field(default=None, ge=0)
    status: str | None = None
    coverage_limits: dict[str, Any] | None = None

    @field_validator("carrier_id", "policy_type", "start_date", "end_date", "status")
    @classmethod
    def _required_not_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class PolicyResponse(BaseModel):
    """Single policy."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    carrier_id: int
    policy_type: str
    start_date: datetime
    end_date: datetime
    premium: int | None = None
    status: str
    coverage_limits: dict[str, Any] | None = None
