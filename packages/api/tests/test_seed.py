# This project was developed with assistance from AI tools.
"""Tests for sample data fixtures and the seeding service."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from db import Carrier, Client, ClientRecord, CoverType, RecordType

from src.services.seed.fixtures import (
    CARRIERS,
    CLIENT_RECORDS,
    CLIENTS,
    COVER_TYPES,
    RECORD_TYPES,
    describe_cover_type,
)
from src.services.seed.seeder import seed_sample_data

# ---------------------------------------------------------------------------
# Fixture data tests
# ---------------------------------------------------------------------------


def test_fixture_counts():
    """Fixture defines 3 carriers, 6 clients, 4 record types, 4 records, 7 cover types."""
    assert len(CARRIERS) == 3
    assert len(CLIENTS) == 6
    assert len(RECORD_TYPES) == 4
    assert len(CLIENT_RECORDS) == 4
    assert len(COVER_TYPES) == 7


@pytest.mark.parametrize("rows", [CARRIERS, CLIENTS, RECORD_TYPES, CLIENT_RECORDS, COVER_TYPES])
def test_fixture_ids_are_sequential_from_one(rows):
    assert [r["id"] for r in rows] == list(range(1, len(rows) + 1))


def test_client_records_reference_seeded_record_types():
    names = {rt["name"] for rt in RECORD_TYPES}
    assert {r["type"] for r in CLIENT_RECORDS} <= names


def test_carrier_appetites_use_conventional_keys():
    for carrier in CARRIERS:
        assert set(carrier["risk_appetite"]) == {"industries", "company_size"}


def test_describe_cover_type():
    assert describe_cover_type("Cyber Liability") == "Insurance coverage for Cyber Liability"


# ---------------------------------------------------------------------------
# Seed service tests (mocked sessions)
# ---------------------------------------------------------------------------


def _seed_session(existing_carriers: int):
    session = AsyncMock()
    session.scalar = AsyncMock(return_value=existing_carriers)

    added = []
    session.add_all = MagicMock(side_effect=lambda objs: added.extend(objs))
    return session, added


@pytest.mark.asyncio
async def test_seed_inserts_every_table():
    """Seed adds all sample rows and commits once."""
    session, added = _seed_session(existing_carriers=0)

    result = await seed_sample_data(session)

    assert result == {
        "status": "seeded",
        "cover_types": 7,
        "record_types": 4,
        "carriers": 3,
        "clients": 6,
        "client_records": 4,
    }
    assert sum(isinstance(o, Carrier) for o in added) == 3
    assert sum(isinstance(o, Client) for o in added) == 6
    assert sum(isinstance(o, ClientRecord) for o in added) == 4
    assert sum(isinstance(o, RecordType) for o in added) == 4
    assert sum(isinstance(o, CoverType) for o in added) == 7
    session.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_seed_syncs_serial_sequences():
    """Seed moves each table's id sequence past the explicit fixture ids."""
    session, _ = _seed_session(existing_carriers=0)

    await seed_sample_data(session)

    statements = [str(call.args[0]) for call in session.execute.await_args_list]
    for table in ("cover_types", "record_types", "carriers", "clients", "client_records"):
        assert any(f"pg_get_serial_sequence('{table}'" in s for s in statements)


@pytest.mark.asyncio
async def test_seed_idempotent():
    """Second call without force returns early, no duplicates."""
    session, added = _seed_session(existing_carriers=3)

    result = await seed_sample_data(session)

    assert result == {"status": "already_seeded"}
    assert added == []
    session.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_seed_force_reseed():
    """force=True clears the sample rows before inserting them again."""
    session, added = _seed_session(existing_carriers=3)

    result = await seed_sample_data(session, force=True)

    assert result["status"] == "seeded"
    statements = [str(call.args[0]) for call in session.execute.await_args_list]
    deletes = [s for s in statements if s.startswith("DELETE")]
    assert len(deletes) == 5
    assert "client_records" in deletes[0]
    assert len(added) == 24
