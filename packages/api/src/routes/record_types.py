# This project was developed with assistance from AI tools.
"""Record type vocabulary routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.record import RecordTypeCreate, RecordTypeResponse
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


@router.get("/", response_model=list[RecordTypeResponse])
async def list_record_types(
    storage: StorageFacade = Depends(get_storage),
) -> list[RecordTypeResponse]:
    return await storage.get_record_types()


@router.get("/{record_type_id}", response_model=RecordTypeResponse)
async def get_record_type(
    record_type_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> RecordTypeResponse:
    record_type = await storage.get_record_type(record_type_id)
    if record_type is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Record type not found")
    return record_type


@router.post("/", response_model=RecordTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_record_type(
    body: RecordTypeCreate,
    storage: StorageFacade = Depends(get_storage),
) -> RecordTypeResponse:
    return await storage.create_record_type(body)
