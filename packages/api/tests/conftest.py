# This project was developed with assistance from AI tools.
"""Shared fixtures: storage facades wired to absent or failing primary stores."""

import pytest

from src.services.storage import FallbackStore, PrimaryStoreClient, StorageFacade

from .fakes import raising_session_factory


@pytest.fixture
def fallback_store():
    return FallbackStore()


@pytest.fixture
def offline_storage(fallback_store):
    """Facade with no primary store configured -- everything is served from memory."""
    return StorageFacade(PrimaryStoreClient(None), fallback_store)


@pytest.fixture
def failing_storage(fallback_store):
    """Facade whose primary store refuses every connection."""
    factory = raising_session_factory(ConnectionRefusedError("connection refused"))
    return StorageFacade(PrimaryStoreClient(factory), fallback_store)
