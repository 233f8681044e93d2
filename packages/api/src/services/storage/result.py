# This project was developed with assistance from AI tools.
"""Outcome of a primary store operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either ``ok`` with a value (which may legitimately be ``None``) or a failure message."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None) -> "StoreResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "StoreResult[T]":
        return cls(ok=False, error=error)
