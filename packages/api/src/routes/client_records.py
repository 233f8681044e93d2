# This project was developed with assistance from AI tools.
"""Client record CRUD routes. Listing by client lives under /api/clients/{id}/records."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..schemas.record import ClientRecordCreate, ClientRecordResponse, ClientRecordUpdate
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client record not found")


@router.get("/{record_id}", response_model=ClientRecordResponse)
async def get_client_record(
    record_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> ClientRecordResponse:
    record = await storage.get_client_record(record_id)
    if record is None:
        raise _not_found()
    return record


@router.post("/", response_model=ClientRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_client_record(
    body: ClientRecordCreate,
    storage: StorageFacade = Depends(get_storage),
) -> ClientRecordResponse:
    return await storage.create_client_record(body)


@router.patch("/{record_id}", response_model=ClientRecordResponse)
async def update_client_record(
    record_id: int,
    body: ClientRecordUpdate,
    storage: StorageFacade = Depends(get_storage),
) -> ClientRecordResponse:
    record = await storage.update_client_record(record_id, body.model_dump(exclude_unset=True))
    if record is None:
        raise _not_found()
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client_record(
    record_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> Response:
    if not await storage.delete_client_record(record_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
