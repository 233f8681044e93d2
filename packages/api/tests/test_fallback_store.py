# This project was developed with assistance from AI tools.
"""Tests for the in-memory fallback store."""

import logging
import threading

import pytest

from src.schemas.carrier import CarrierResponse
from src.schemas.record import RecordTypeResponse
from src.services.seed.fixtures import CARRIERS, CLIENT_RECORDS, CLIENTS, COVER_TYPES, RECORD_TYPES
from src.services.storage import FallbackStore, FallbackTable

# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


def test_seeded_from_sample_fixtures(fallback_store):
    """should start with every sample row and no policies or chat messages."""
    assert len(fallback_store.carriers) == len(CARRIERS) == 3
    assert len(fallback_store.clients) == len(CLIENTS) == 6
    assert len(fallback_store.record_types) == len(RECORD_TYPES) == 4
    assert len(fallback_store.client_records) == len(CLIENT_RECORDS) == 4
    assert len(fallback_store.cover_types) == len(COVER_TYPES) == 7
    assert len(fallback_store.policies) == 0
    assert len(fallback_store.chat_messages) == 0


def test_seeded_clients_have_created_at(fallback_store):
    """should stamp seeded clients and client records with a creation time."""
    assert all(c.created_at is not None for c in fallback_store.clients.all())
    assert all(r.created_at is not None for r in fallback_store.client_records.all())


def test_cover_types_carry_generated_descriptions(fallback_store):
    """should expose cover types as name + 'Insurance coverage for <name>'."""
    cyber = fallback_store.cover_types.get(3)
    assert cyber.name == "Cyber Liability"
    assert cyber.description == "Insurance coverage for Cyber Liability"


# ---------------------------------------------------------------------------
# Id allocation
# ---------------------------------------------------------------------------


def test_next_id_continues_after_highest_seeded_id(fallback_store):
    """should hand out max(seeded id) + 1 for the first insert."""
    created = fallback_store.clients.insert(
        lambda new_id: fallback_store.clients.get(1).model_copy(update={"id": new_id})
    )
    assert created.id == 7


def test_ids_are_not_reused_after_delete():
    """should keep counting up even when the highest row is deleted."""
    table = FallbackTable([RecordTypeResponse(id=1, name="Property")])
    second = table.insert(lambda new_id: RecordTypeResponse(id=new_id, name="Revenue"))
    assert table.delete(second.id) is True

    third = table.insert(lambda new_id: RecordTypeResponse(id=new_id, name="CGL"))
    assert third.id == 3


def test_empty_table_starts_at_one():
    """should allocate id 1 in a table that was never seeded."""
    table: FallbackTable[RecordTypeResponse] = FallbackTable()
    created = table.insert(lambda new_id: RecordTypeResponse(id=new_id, name="Property"))
    assert created.id == 1


def test_concurrent_inserts_get_distinct_ids():
    """should never hand the same id to two writers."""
    table: FallbackTable[RecordTypeResponse] = FallbackTable()

    def writer():
        for _ in range(50):
            table.insert(lambda new_id: RecordTypeResponse(id=new_id, name="x"))

    threads = [threading.Thread(target=writer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r.id for r in table.all()]
    assert len(ids) == 400
    assert sorted(ids) == list(range(1, 401))


# ---------------------------------------------------------------------------
# Reads, updates, deletes
# ---------------------------------------------------------------------------


def test_get_unknown_id_returns_none(fallback_store):
    assert fallback_store.carriers.get(999) is None


def test_update_merges_only_given_fields(fallback_store):
    """should keep every field not named in the update."""
    updated = fallback_store.carriers.update(1, {"phone": "555-000-0000"})

    assert updated.phone == "555-000-0000"
    assert updated.name == "Acme Insurance"
    assert fallback_store.carriers.get(1) == updated


def test_update_revalidates_merged_row(fallback_store):
    """should coerce merged values through the row schema."""
    updated = fallback_store.clients.update(2, {"employees": "160"})

    assert updated.employees == 160
    assert fallback_store.clients.get(2).employees == 160


def test_update_failing_validation_keeps_row(fallback_store, caplog):
    """should leave the row as it was and warn when the merge is not a valid row."""
    before = fallback_store.clients.get(1)

    with caplog.at_level(logging.WARNING, logger="src.services.storage.fallback"):
        result = fallback_store.clients.update(1, {"name": None, "employees": "many"})

    assert result == before
    assert fallback_store.clients.get(1) == before
    assert "Rejected fallback update to ClientResponse 1" in caplog.text


def test_update_unknown_id_returns_none(fallback_store):
    assert fallback_store.carriers.update(42, {"name": "Ghost"}) is None
    assert len(fallback_store.carriers) == 3


def test_delete_is_idempotent(fallback_store):
    """should report True once and False for every repeat."""
    assert fallback_store.carriers.delete(2) is True
    assert fallback_store.carriers.delete(2) is False
    assert fallback_store.carriers.get(2) is None


def test_first_returns_none_without_match(fallback_store):
    assert fallback_store.clients.first(lambda c: c.name == "Nobody") is None


def test_all_with_predicate_filters(fallback_store):
    records = fallback_store.client_records.all(lambda r: r.client_id == 1)
    assert {r.type for r in records} == {"Property", "Revenue", "CGL", "Employees"}


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------


def test_reset_restores_sample_data(fallback_store):
    """should discard inserts, updates and deletes and restart id counters."""
    fallback_store.carriers.delete(1)
    fallback_store.carriers.update(2, {"name": "Renamed"})
    fallback_store.carriers.insert(lambda new_id: CarrierResponse(id=new_id, name="Extra"))

    fallback_store.reset()

    assert [c.name for c in sorted(fallback_store.carriers.all(), key=lambda c: c.id)] == [
        "Acme Insurance",
        "Liberty Shield",
        "Pacific Mutual",
    ]
    created = fallback_store.carriers.insert(lambda new_id: CarrierResponse(id=new_id, name="New"))
    assert created.id == 4


@pytest.mark.parametrize("attr", ["carriers", "clients", "record_types", "cover_types"])
def test_separate_stores_do_not_share_rows(attr):
    """should give each FallbackStore its own tables."""
    first, second = FallbackStore(), FallbackStore()
    getattr(first, attr).delete(1)
    assert getattr(second, attr).get(1) is not None
