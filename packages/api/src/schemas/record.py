# This project was developed with assistance from AI tools.
"""Record type, client record, and cover type schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordTypeCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None


class RecordTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None


class ClientRecordCreate(BaseModel):
    """A dated fact about a client. ``value`` is free text even for amounts."""

    client_id: int
    type: str = Field(min_length=1)
    description: str | None = None
    value: str | None = None
    date: datetime | None = None


class ClientRecordUpdate(BaseModel):
    type: str | None = Field(default=None, min_length=1)
    description: str | None = None
    value: str | None = None
    date: datetime | None = None

    @field_validator("type")
    @classmethod
    def _type_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("type cannot be null")
        return value


class ClientRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    type: str
    description: str | None = None
    value: str | None = None
    date: datetime | None = None
    created_at: datetime | None = None


class CoverTypeResponse(BaseModel):
    """A line of coverage as shown to brokers."""

    id: int
    name: str
    description: str
