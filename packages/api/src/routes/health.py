# This project was developed with assistance from AI tools.
"""Health check routes."""

from fastapi import APIRouter, Depends

from .. import __version__
from ..schemas.health import HealthResponse
from ..services.storage import ConnectionState, StorageFacade, get_storage

router = APIRouter()

_DB_MESSAGES = {
    ConnectionState.IDLE: "PostgreSQL connection not attempted yet",
    ConnectionState.CONNECTING: "Connecting to PostgreSQL",
    ConnectionState.CONNECTED: "PostgreSQL reachable",
    ConnectionState.UNAVAILABLE: "PostgreSQL unavailable, serving in-memory sample data",
}


@router.get("/", response_model=list[HealthResponse])
async def health(storage: StorageFacade = Depends(get_storage)) -> list[HealthResponse]:
    """Report API liveness and the primary store state seen by the startup bootstrapper.

    The API stays healthy while the database is down; reads and writes are
    then served from the in-memory store.
    """
    state = storage.primary_state
    db_status = "healthy" if state == ConnectionState.CONNECTED else "degraded"
    message = _DB_MESSAGES[state]
    if state == ConnectionState.CONNECTING and storage.bootstrapper is not None:
        message = f"{message} (attempt {storage.bootstrapper.attempt})"
    return [
        HealthResponse(name="API", status="healthy", message="API is running", version=__version__),
        HealthResponse(name="Database", status=db_status, message=message),
    ]
