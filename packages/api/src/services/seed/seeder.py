# This project was developed with assistance from AI tools.
"""Sample data seeding service.

Loads the same carriers, clients, record types, client records and cover
types the in-memory fallback store starts with, so a fresh database and an
outage look the same to brokers.

Fictional data -- not real insurance information.
"""

import logging

from db import Carrier, Client, ClientRecord, CoverType, RecordType
from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import CARRIERS, CLIENT_RECORDS, CLIENTS, COVER_TYPES, RECORD_TYPES

logger = logging.getLogger(__name__)

# Insert order; cleared in reverse
_SEED_TABLES: list[tuple[type, list[dict]]] = [
    (CoverType, COVER_TYPES),
    (RecordType, RECORD_TYPES),
    (Carrier, CARRIERS),
    (Client, CLIENTS),
    (ClientRecord, CLIENT_RECORDS),
]


async def _is_seeded(session: AsyncSession) -> bool:
    count = await session.scalar(select(func.count()).select_from(Carrier))
    return bool(count)


async def _clear_sample_data(session: AsyncSession) -> None:
    """Delete the seeded rows by their fixed ids."""
    for model, rows in reversed(_SEED_TABLES):
        ids = [row["id"] for row in rows]
        await session.execute(delete(model).where(model.id.in_(ids)))
    logger.info("Cleared existing sample data")


async def _sync_sequence(session: AsyncSession, table: str) -> None:
    """Move the serial sequence past explicitly inserted ids."""
    await session.execute(
        text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
            f"COALESCE((SELECT MAX(id) FROM {table}), 1))"
        )
    )


async def seed_sample_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed the primary store with sample data.

    Args:
        session: Database session.
        force: If True, clear the sample rows and re-seed.

    Returns:
        Summary dict with ``status`` and per-table counts.
    """
    if await _is_seeded(session) and not force:
        return {"status": "already_seeded"}

    if force:
        await _clear_sample_data(session)

    counts: dict[str, int] = {}
    for model, rows in _SEED_TABLES:
        session.add_all(model(**row) for row in rows)
        await session.flush()
        await _sync_sequence(session, model.__tablename__)
        counts[model.__tablename__] = len(rows)

    await session.commit()
    logger.info("Seeded sample data: %s", counts)
    return {"status": "seeded", **counts}
