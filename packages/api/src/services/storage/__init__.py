# This project was developed with assistance from AI tools.
"""Storage layer: primary Postgres store with an in-memory fallback."""

from db import DatabaseService
from db.config import DatabaseSettings
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .bootstrap import ConnectionBootstrapper, ConnectionState, RetryPolicy
from .facade import StorageFacade
from .fallback import FallbackStore, FallbackTable
from .matching import carrier_matches_risk_profile
from .primary import PrimaryStoreClient
from .result import StoreResult


def build_storage(
    cfg: DatabaseSettings,
    db: DatabaseService,
    session_factory: async_sessionmaker[AsyncSession] | None,
) -> StorageFacade:
    """Wire the primary client, fallback store and bootstrapper into one facade."""
    return StorageFacade(
        primary=PrimaryStoreClient(session_factory),
        fallback=FallbackStore(),
        bootstrapper=ConnectionBootstrapper(db, RetryPolicy.from_settings(cfg)),
    )


def get_storage(request: Request) -> StorageFacade:
    """FastAPI dependency returning the facade built in the app lifespan."""
    return request.app.state.storage


__all__ = [
    "ConnectionBootstrapper",
    "ConnectionState",
    "FallbackStore",
    "FallbackTable",
    "PrimaryStoreClient",
    "RetryPolicy",
    "StorageFacade",
    "StoreResult",
    "build_storage",
    "carrier_matches_risk_profile",
    "get_storage",
]
