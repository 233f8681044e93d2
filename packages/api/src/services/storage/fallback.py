# This project was developed with assistance from AI tools.
"""In-memory fallback store.

One ``FallbackTable`` per entity, seeded from the sample fixtures. Ids keep
counting up from the highest seeded id and are never reused. Nothing is
persisted: a restart (or ``reset()``) returns every table to the sample data.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ...schemas.carrier import CarrierResponse
from ...schemas.chat import ChatMessageResponse
from ...schemas.client import ClientResponse
from ...schemas.policy import PolicyResponse
from ...schemas.record import ClientRecordResponse, CoverTypeResponse, RecordTypeResponse
from ..seed.fixtures import (
    CARRIERS,
    CLIENT_RECORDS,
    CLIENTS,
    COVER_TYPES,
    RECORD_TYPES,
    describe_cover_type,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class FallbackTable(Generic[R]):
    """Id-keyed rows guarded by a lock so read-modify-write stays atomic."""

    def __init__(self, rows: Iterable[R] = ()):
        self._lock = threading.Lock()
        self._rows: dict[int, R] = {}
        self._next_id = 1
        self.load(rows)

    def load(self, rows: Iterable[R]) -> None:
        with self._lock:
            self._rows = {row.id: row for row in rows}
            self._next_id = max(self._rows, default=0) + 1

    def all(self, predicate: Callable[[R], bool] | None = None) -> list[R]:
        with self._lock:
            rows = list(self._rows.values())
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def first(self, predicate: Callable[[R], bool]) -> R | None:
        return next(iter(self.all(predicate)), None)

    def get(self, row_id: int) -> R | None:
        with self._lock:
            return self._rows.get(row_id)

    def insert(self, build: Callable[[int], R]) -> R:
        """Allocate the next id and store the row ``build(id)`` returns."""
        with self._lock:
            row_id = self._next_id
            row = build(row_id)
            self._rows[row_id] = row
            self._next_id += 1
            return row

    def update(self, row_id: int, changes: dict[str, Any]) -> R | None:
        """Merge ``changes`` into the row; changes that fail validation leave it as it was."""
        with self._lock:
            current = self._rows.get(row_id)
            if current is None:
                return None
            try:
                updated = type(current).model_validate({**current.model_dump(), **changes})
            except ValidationError as exc:
                logger.warning(
                    "Rejected fallback update to %s %s: %s",
                    type(current).__name__,
                    row_id,
                    exc.errors(include_url=False),
                )
                return current
            self._rows[row_id] = updated
            return updated

    def delete(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(row_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


class FallbackStore:
    """Sample-data tables served whenever the primary store fails."""

    def __init__(self):
        self.carriers: FallbackTable[CarrierResponse] = FallbackTable()
        self.clients: FallbackTable[ClientResponse] = FallbackTable()
        self.policies: FallbackTable[PolicyResponse] = FallbackTable()
        self.chat_messages: FallbackTable[ChatMessageResponse] = FallbackTable()
        self.record_types: FallbackTable[RecordTypeResponse] = FallbackTable()
        self.client_records: FallbackTable[ClientRecordResponse] = FallbackTable()
        self.cover_types: FallbackTable[CoverTypeResponse] = FallbackTable()
        self.reset()

    def reset(self) -> None:
        """Discard every change and reload the sample data."""
        seeded_at = datetime.now(UTC)
        self.carriers.load(CarrierResponse(**row) for row in CARRIERS)
        self.clients.load(ClientResponse(**row, created_at=seeded_at) for row in CLIENTS)
        self.policies.load(())
        self.chat_messages.load(())
        self.record_types.load(RecordTypeResponse(**row) for row in RECORD_TYPES)
        self.client_records.load(
            ClientRecordResponse(**row, created_at=seeded_at) for row in CLIENT_RECORDS
        )
        self.cover_types.load(
            CoverTypeResponse(
                id=row["id"], name=row["type"], description=describe_cover_type(row["type"])
            )
            for row in COVER_TYPES
        )
