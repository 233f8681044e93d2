# This project was developed with assistance from AI tools.
"""Primary (Postgres) store client.

Every method returns a ``StoreResult`` instead of raising. Rows are converted
to response schemas inside the session, so a row that fails validation is
reported as a failure just like a dropped connection or a timeout.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from db import Carrier, ChatMessage, Client, ClientRecord, CoverType, Policy, RecordType
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...schemas.carrier import CarrierResponse
from ...schemas.chat import ChatMessageResponse
from ...schemas.client import ClientResponse
from ...schemas.policy import PolicyResponse
from ...schemas.record import ClientRecordResponse, CoverTypeResponse, RecordTypeResponse
from ..seed.fixtures import describe_cover_type
from .matching import carrier_matches_risk_profile
from .result import StoreResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

NOT_CONFIGURED = "primary store not configured"


def _cover_type_from_row(row: CoverType) -> CoverTypeResponse:
    return CoverTypeResponse(id=row.id, name=row.type, description=describe_cover_type(row.type))


class PrimaryStoreClient:
    """Table-scoped CRUD over SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession] | None):
        self._session_factory = session_factory

    @property
    def is_configured(self) -> bool:
        return self._session_factory is not None

    async def _run(self, work: Callable[[AsyncSession], Awaitable[T]]) -> StoreResult[T]:
        if self._session_factory is None:
            return StoreResult.failure(NOT_CONFIGURED)
        try:
            async with self._session_factory() as session:
                return StoreResult.success(await work(session))
        except Exception as exc:
            logger.debug("Primary store operation raised", exc_info=True)
            return StoreResult.failure(f"{type(exc).__name__}: {exc}")

    # -- Generic table operations ------------------------------------------

    async def select_all(
        self,
        model: Any,
        convert: Callable[[Any], T],
        *where: Any,
        order_by: Any = None,
    ) -> StoreResult[list[T]]:
        async def work(session: AsyncSession) -> list[T]:
            stmt = select(model).where(*where).order_by(
                *(order_by if order_by is not None else (model.id,))
            )
            rows = (await session.execute(stmt)).scalars().all()
            return [convert(row) for row in rows]

        return await self._run(work)

    async def select_first(
        self, model: Any, convert: Callable[[Any], T], *where: Any
    ) -> StoreResult[T | None]:
        async def work(session: AsyncSession) -> T | None:
            stmt = select(model).where(*where).order_by(model.id).limit(1)
            row = (await session.execute(stmt)).scalars().first()
            return convert(row) if row is not None else None

        return await self._run(work)

    async def select_by_id(
        self, model: Any, convert: Callable[[Any], T], row_id: int
    ) -> StoreResult[T | None]:
        return await self.select_first(model, convert, model.id == row_id)

    async def insert(
        self, model: Any, convert: Callable[[Any], T], values: dict[str, Any]
    ) -> StoreResult[T]:
        async def work(session: AsyncSession) -> T:
            row = (
                await session.execute(insert(model).values(**values).returning(model))
            ).scalar_one()
            await session.commit()
            return convert(row)

        return await self._run(work)

    async def update(
        self, model: Any, convert: Callable[[Any], T], row_id: int, values: dict[str, Any]
    ) -> StoreResult[T | None]:
        """Update and return the row; ``None`` when no row has ``row_id``."""
        if not values:
            return await self.select_by_id(model, convert, row_id)

        async def work(session: AsyncSession) -> T | None:
            stmt = update(model).where(model.id == row_id).values(**values).returning(model)
            row = (await session.execute(stmt)).scalars().first()
            await session.commit()
            return convert(row) if row is not None else None

        return await self._run(work)

    async def delete(self, model: Any, row_id: int) -> StoreResult[bool]:
        async def work(session: AsyncSession) -> bool:
            result = await session.execute(delete(model).where(model.id == row_id))
            await session.commit()
            return result.rowcount > 0

        return await self._run(work)

    # -- Carriers -------------------------------------------------------------

    async def get_carriers(self) -> StoreResult[list[CarrierResponse]]:
        return await self.select_all(Carrier, CarrierResponse.model_validate)

    async def get_carrier(self, carrier_id: int) -> StoreResult[CarrierResponse | None]:
        return await self.select_by_id(Carrier, CarrierResponse.model_validate, carrier_id)

    async def create_carrier(self, values: dict[str, Any]) -> StoreResult[CarrierResponse]:
        return await self.insert(Carrier, CarrierResponse.model_validate, values)

    async def update_carrier(
        self, carrier_id: int, values: dict[str, Any]
    ) -> StoreResult[CarrierResponse | None]:
        return await self.update(Carrier, CarrierResponse.model_validate, carrier_id, values)

    async def delete_carrier(self, carrier_id: int) -> StoreResult[bool]:
        return await self.delete(Carrier, carrier_id)

    async def get_carriers_by_risk_profile(
        self, profile: dict[str, Any]
    ) -> StoreResult[list[CarrierResponse]]:
        """Load every carrier and filter with the shared appetite predicate."""

        async def work(session: AsyncSession) -> list[CarrierResponse]:
            rows = (await session.execute(select(Carrier).order_by(Carrier.id))).scalars().all()
            carriers = [CarrierResponse.model_validate(row) for row in rows]
            return [c for c in carriers if carrier_matches_risk_profile(c.risk_appetite, profile)]

        return await self._run(work)

    # -- Clients --------------------------------------------------------------

    async def get_clients(self) -> StoreResult[list[ClientResponse]]:
        return await self.select_all(Client, ClientResponse.model_validate)

    async def get_client(self, client_id: int) -> StoreResult[ClientResponse | None]:
        return await self.select_by_id(Client, ClientResponse.model_validate, client_id)

    async def get_client_by_name(self, name: str) -> StoreResult[ClientResponse | None]:
        return await self.select_first(
            Client, ClientResponse.model_validate, Client.name.ilike(f"%{name}%")
        )

    async def create_client(self, values: dict[str, Any]) -> StoreResult[ClientResponse]:
        return await self.insert(Client, ClientResponse.model_validate, values)

    async def update_client(
        self, client_id: int, values: dict[str, Any]
    ) -> StoreResult[ClientResponse | None]:
        return await self.update(Client, ClientResponse.model_validate, client_id, values)

    async def delete_client(self, client_id: int) -> StoreResult[bool]:
        return await self.delete(Client, client_id)

    # -- Policies -------------------------------------------------------------

    async def get_policy(self, policy_id: int) -> StoreResult[PolicyResponse | None]:
        return await self.select_by_id(Policy, PolicyResponse.model_validate, policy_id)

    async def get_client_policies(self, client_id: int) -> StoreResult[list[PolicyResponse]]:
        return await self.select_all(
            Policy, PolicyResponse.model_validate, Policy.client_id == client_id
        )

    async def create_policy(self, values: dict[str, Any]) -> StoreResult[PolicyResponse]:
        return await self.insert(Policy, PolicyResponse.model_validate, values)

    async def update_policy(
        self, policy_id: int, values: dict[str, Any]
    ) -> StoreResult[PolicyResponse | None]:
        return await self.update(Policy, PolicyResponse.model_validate, policy_id, values)

    async def delete_policy(self, policy_id: int) -> StoreResult[bool]:
        return await self.delete(Policy, policy_id)

    # -- Chat messages --------------------------------------------------------

    async def get_chat_messages(
        self, client_id: int | None = None
    ) -> StoreResult[list[ChatMessageResponse]]:
        where = () if client_id is None else (ChatMessage.client_id == client_id,)
        return await self.select_all(
            ChatMessage,
            ChatMessageResponse.model_validate,
            *where,
            order_by=(ChatMessage.timestamp, ChatMessage.id),
        )

    async def save_chat_message(self, values: dict[str, Any]) -> StoreResult[ChatMessageResponse]:
        return await self.insert(ChatMessage, ChatMessageResponse.model_validate, values)

    # -- Record types ---------------------------------------------------------

    async def get_record_types(self) -> StoreResult[list[RecordTypeResponse]]:
        return await self.select_all(RecordType, RecordTypeResponse.model_validate)

    async def get_record_type(self, record_type_id: int) -> StoreResult[RecordTypeResponse | None]:
        return await self.select_by_id(RecordType, RecordTypeResponse.model_validate, record_type_id)

    async def create_record_type(self, values: dict[str, Any]) -> StoreResult[RecordTypeResponse]:
        return await self.insert(RecordType, RecordTypeResponse.model_validate, values)

    # -- Client records -------------------------------------------------------

    async def get_client_records(self, client_id: int) -> StoreResult[list[ClientRecordResponse]]:
        return await self.select_all(
            ClientRecord, ClientRecordResponse.model_validate, ClientRecord.client_id == client_id
        )

    async def get_client_record(self, record_id: int) -> StoreResult[ClientRecordResponse | None]:
        return await self.select_by_id(ClientRecord, ClientRecordResponse.model_validate, record_id)

    async def create_client_record(
        self, values: dict[str, Any]
    ) -> StoreResult[ClientRecordResponse]:
        return await self.insert(ClientRecord, ClientRecordResponse.model_validate, values)

    async def update_client_record(
        self, record_id: int, values: dict[str, Any]
    ) -> StoreResult[ClientRecordResponse | None]:
        return await self.update(
            ClientRecord, ClientRecordResponse.model_validate, record_id, values
        )

    async def delete_client_record(self, record_id: int) -> StoreResult[bool]:
        return await self.delete(ClientRecord, record_id)

    # -- Cover types ----------------------------------------------------------

    async def get_cover_types(self) -> StoreResult[list[CoverTypeResponse]]:
        return await self.select_all(CoverType, _cover_type_from_row)
