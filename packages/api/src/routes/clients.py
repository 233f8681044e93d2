# This project was developed with assistance from AI tools.
"""Client routes.

Clients are never deleted over HTTP.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..schemas.client import ClientCreate, ClientResponse, ClientUpdate
from ..schemas.policy import PolicyResponse
from ..schemas.record import ClientRecordResponse
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


@router.get("/", response_model=list[ClientResponse])
async def list_clients(
    name: str | None = Query(default=None, min_length=1, description="Case-insensitive name search"),
    storage: StorageFacade = Depends(get_storage),
) -> list[ClientResponse]:
    """All clients, or the first client whose name contains ``name`` (as a 0/1 item list)."""
    if name is None:
        return await storage.get_clients()
    match = await storage.get_client_by_name(name)
    return [match] if match is not None else []


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> ClientResponse:
    client = await storage.get_client(client_id)
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return client


@router.post("/", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    body: ClientCreate,
    storage: StorageFacade = Depends(get_storage),
) -> ClientResponse:
    return await storage.create_client(body)


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    body: ClientUpdate,
    storage: StorageFacade = Depends(get_storage),
) -> ClientResponse:
    client = await storage.update_client(client_id, body.model_dump(exclude_unset=True))
    if client is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return client


@router.get("/{client_id}/policies", response_model=list[PolicyResponse])
async def list_client_policies(
    client_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> list[PolicyResponse]:
    return await storage.get_client_policies(client_id)


@router.get("/{client_id}/records", response_model=list[ClientRecordResponse])
async def list_client_records(
    client_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> list[ClientRecordResponse]:
    return await storage.get_client_records(client_id)
