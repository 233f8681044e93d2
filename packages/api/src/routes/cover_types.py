# This project was developed with assistance from AI tools.
"""Cover type routes (read-only)."""

from fastapi import APIRouter, Depends

from ..schemas.record import CoverTypeResponse
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


@router.get("/", response_model=list[CoverTypeResponse])
async def list_cover_types(
    storage: StorageFacade = Depends(get_storage),
) -> list[CoverTypeResponse]:
    return await storage.get_cover_types()
