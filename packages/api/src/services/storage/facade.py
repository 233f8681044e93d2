# This project was developed with assistance from AI tools.
"""Storage facade -- the only storage object routes and services talk to.

Every operation asks the primary store first. A failed result is logged once
and the same operation is answered from the in-memory fallback store, so no
storage error ever reaches the caller. The primary store is retried on every
call regardless of what the startup bootstrapper concluded.

Primary ids (Postgres serials) and fallback ids (in-process counters) are two
separate id spaces; a record created during an outage can share an id with a
primary row.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from ...schemas.carrier import CarrierCreate, CarrierResponse
from ...schemas.chat import ChatMessageCreate, ChatMessageResponse
from ...schemas.client import ClientCreate, ClientResponse
from ...schemas.policy import PolicyCreate, PolicyResponse
from ...schemas.record import (
    ClientRecordCreate,
    ClientRecordResponse,
    CoverTypeResponse,
    RecordTypeCreate,
    RecordTypeResponse,
)
from .bootstrap import ConnectionBootstrapper, ConnectionState
from .fallback import FallbackStore
from .matching import carrier_matches_risk_profile
from .primary import PrimaryStoreClient
from .result import StoreResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(UTC)


def _settable(model: type[BaseModel], changes: dict[str, Any]) -> dict[str, Any]:
    """Drop explicit ``None`` for fields a stored row cannot leave empty."""
    fields = model.model_fields
    return {
        key: value
        for key, value in changes.items()
        if value is not None or key not in fields or not fields[key].is_required()
    }


class StorageFacade:
    """Try-primary, fall-back-to-memory access for every entity."""

    def __init__(
        self,
        primary: PrimaryStoreClient,
        fallback: FallbackStore | None = None,
        bootstrapper: ConnectionBootstrapper | None = None,
    ):
        self.primary = primary
        self.fallback = fallback or FallbackStore()
        self.bootstrapper = bootstrapper

    @property
    def primary_state(self) -> ConnectionState:
        if self.bootstrapper is None:
            return ConnectionState.IDLE
        return self.bootstrapper.state

    def _resolve(self, operation: str, result: StoreResult[T], fallback: Callable[[], T]) -> T:
        if result.ok:
            return result.value
        logger.warning("Primary store %s failed, serving fallback: %s", operation, result.error)
        return fallback()

    # -- Carriers -------------------------------------------------------------

    async def get_carriers(self) -> list[CarrierResponse]:
        result = await self.primary.get_carriers()
        return self._resolve("get_carriers", result, self.fallback.carriers.all)

    async def get_carrier(self, carrier_id: int) -> CarrierResponse | None:
        result = await self.primary.get_carrier(carrier_id)
        return self._resolve(
            "get_carrier", result, lambda: self.fallback.carriers.get(carrier_id)
        )

    async def create_carrier(self, data: CarrierCreate) -> CarrierResponse:
        values = data.model_dump()
        result = await self.primary.create_carrier(values)
        return self._resolve(
            "create_carrier",
            result,
            lambda: self.fallback.carriers.insert(
                lambda new_id: CarrierResponse(id=new_id, **values)
            ),
        )

    async def update_carrier(
        self, carrier_id: int, changes: dict[str, Any]
    ) -> CarrierResponse | None:
        changes = _settable(CarrierResponse, changes)
        result = await self.primary.update_carrier(carrier_id, changes)
        return self._resolve(
            "update_carrier", result, lambda: self.fallback.carriers.update(carrier_id, changes)
        )

    async def delete_carrier(self, carrier_id: int) -> bool:
        result = await self.primary.delete_carrier(carrier_id)
        return self._resolve(
            "delete_carrier", result, lambda: self.fallback.carriers.delete(carrier_id)
        )

    async def get_carriers_by_risk_profile(self, profile: dict[str, Any]) -> list[CarrierResponse]:
        """Carriers whose risk appetite does not rule out ``profile`` (industry, size)."""
        result = await self.primary.get_carriers_by_risk_profile(profile)
        return self._resolve(
            "get_carriers_by_risk_profile",
            result,
            lambda: self.fallback.carriers.all(
                lambda c: carrier_matches_risk_profile(c.risk_appetite, profile)
            ),
        )

    # -- Clients --------------------------------------------------------------

    async def get_clients(self) -> list[ClientResponse]:
        result = await self.primary.get_clients()
        return self._resolve("get_clients", result, self.fallback.clients.all)

    async def get_client(self, client_id: int) -> ClientResponse | None:
        result = await self.primary.get_client(client_id)
        return self._resolve("get_client", result, lambda: self.fallback.clients.get(client_id))

    async def get_client_by_name(self, name: str) -> ClientResponse | None:
        """First client whose name contains ``name``, ignoring case."""
        needle = name.lower()
        result = await self.primary.get_client_by_name(name)
        return self._resolve(
            "get_client_by_name",
            result,
            lambda: self.fallback.clients.first(lambda c: needle in c.name.lower()),
        )

    async def create_client(self, data: ClientCreate) -> ClientResponse:
        values = data.model_dump()
        result = await self.primary.create_client(values)
        return self._resolve(
            "create_client",
            result,
            lambda: self.fallback.clients.insert(
                lambda new_id: ClientResponse(id=new_id, created_at=_now(), **values)
            ),
        )

    async def update_client(self, client_id: int, changes: dict[str, Any]) -> ClientResponse | None:
        changes = _settable(ClientResponse, changes)
        result = await self.primary.update_client(client_id, changes)
        return self._resolve(
            "update_client", result, lambda: self.fallback.clients.update(client_id, changes)
        )

    async def delete_client(self, client_id: int) -> bool:
        result = await self.primary.delete_client(client_id)
        return self._resolve(
            "delete_client", result, lambda: self.fallback.clients.delete(client_id)
        )

    # -- Policies -------------------------------------------------------------

    async def get_policy(self, policy_id: int) -> PolicyResponse | None:
        result = await self.primary.get_policy(policy_id)
        return self._resolve("get_policy", result, lambda: self.fallback.policies.get(policy_id))

    async def get_client_policies(self, client_id: int) -> list[PolicyResponse]:
        result = await self.primary.get_client_policies(client_id)
        return self._resolve(
            "get_client_policies",
            result,
            lambda: self.fallback.policies.all(lambda p: p.client_id == client_id),
        )

    async def create_policy(self, data: PolicyCreate) -> PolicyResponse:
        values = data.model_dump()
        result = await self.primary.create_policy(values)
        return self._resolve(
            "create_policy",
            result,
            lambda: self.fallback.policies.insert(
                lambda new_id: PolicyResponse(id=new_id, **values)
            ),
        )

    async def update_policy(self, policy_id: int, changes: dict[str, Any]) -> PolicyResponse | None:
        changes = _settable(PolicyResponse, changes)
        result = await self.primary.update_policy(policy_id, changes)
        return self._resolve(
            "update_policy", result, lambda: self.fallback.policies.update(policy_id, changes)
        )

    async def delete_policy(self, policy_id: int) -> bool:
        result = await self.primary.delete_policy(policy_id)
        return self._resolve(
            "delete_policy", result, lambda: self.fallback.policies.delete(policy_id)
        )

    # -- Chat messages --------------------------------------------------------

    async def get_chat_messages(self, client_id: int | None = None) -> list[ChatMessageResponse]:
        """Messages in timestamp order, optionally limited to one client."""
        result = await self.primary.get_chat_messages(client_id)

        def from_fallback() -> list[ChatMessageResponse]:
            messages = self.fallback.chat_messages.all(
                None if client_id is None else (lambda m: m.client_id == client_id)
            )
            return sorted(messages, key=lambda m: (m.timestamp or _now(), m.id))

        return self._resolve("get_chat_messages", result, from_fallback)

    async def save_chat_message(self, data: ChatMessageCreate) -> ChatMessageResponse:
        values = data.model_dump()
        result = await self.primary.save_chat_message(values)
        return self._resolve(
            "save_chat_message",
            result,
            lambda: self.fallback.chat_messages.insert(
                lambda new_id: ChatMessageResponse(id=new_id, timestamp=_now(), **values)
            ),
        )

    # -- Record types ---------------------------------------------------------

    async def get_record_types(self) -> list[RecordTypeResponse]:
        result = await self.primary.get_record_types()
        return self._resolve("get_record_types", result, self.fallback.record_types.all)

    async def get_record_type(self, record_type_id: int) -> RecordTypeResponse | None:
        result = await self.primary.get_record_type(record_type_id)
        return self._resolve(
            "get_record_type", result, lambda: self.fallback.record_types.get(record_type_id)
        )

    async def create_record_type(self, data: RecordTypeCreate) -> RecordTypeResponse:
        values = data.model_dump()
        result = await self.primary.create_record_type(values)
        return self._resolve(
            "create_record_type",
            result,
            lambda: self.fallback.record_types.insert(
                lambda new_id: RecordTypeResponse(id=new_id, **values)
            ),
        )

    # -- Client records -------------------------------------------------------

    async def get_client_records(self, client_id: int) -> list[ClientRecordResponse]:
        result = await self.primary.get_client_records(client_id)
        return self._resolve(
            "get_client_records",
            result,
            lambda: self.fallback.client_records.all(lambda r: r.client_id == client_id),
        )

    async def get_client_record(self, record_id: int) -> ClientRecordResponse | None:
        result = await self.primary.get_client_record(record_id)
        return self._resolve(
            "get_client_record", result, lambda: self.fallback.client_records.get(record_id)
        )

    async def create_client_record(self, data: ClientRecordCreate) -> ClientRecordResponse:
        values = data.model_dump()
        result = await self.primary.create_client_record(values)
        return self._resolve(
            "create_client_record",
            result,
            lambda: self.fallback.client_records.insert(
                lambda new_id: ClientRecordResponse(id=new_id, created_at=_now(), **values)
            ),
        )

    async def update_client_record(
        self, record_id: int, changes: dict[str, Any]
    ) -> ClientRecordResponse | None:
        changes = _settable(ClientRecordResponse, changes)
        result = await self.primary.update_client_record(record_id, changes)
        return self._resolve(
            "update_client_record",
            result,
            lambda: self.fallback.client_records.update(record_id, changes),
        )

    async def delete_client_record(self, record_id: int) -> bool:
        result = await self.primary.delete_client_record(record_id)
        return self._resolve(
            "delete_client_record", result, lambda: self.fallback.client_records.delete(record_id)
        )

    # -- Cover types ----------------------------------------------------------

    async def get_cover_types(self) -> list[CoverTypeResponse]:
        result = await self.primary.get_cover_types()
        return self._resolve("get_cover_types", result, self.fallback.cover_types.all)
