# This project was developed with assistance from AI tools.
"""Carrier routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.assistant import RiskProfileQuery
from ..schemas.carrier import CarrierCreate, CarrierResponse
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


@router.get("/", response_model=list[CarrierResponse])
async def list_carriers(storage: StorageFacade = Depends(get_storage)) -> list[CarrierResponse]:
    return await storage.get_carriers()


@router.post("/match", response_model=list[CarrierResponse])
async def match_carriers(
    body: RiskProfileQuery,
    storage: StorageFacade = Depends(get_storage),
) -> list[CarrierResponse]:
    """Carriers whose risk appetite accepts the given industry and company size."""
    return await storage.get_carriers_by_risk_profile(body.model_dump(exclude_none=True))


@router.get("/{carrier_id}", response_model=CarrierResponse)
async def get_carrier(
    carrier_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> CarrierResponse:
    carrier = await storage.get_carrier(carrier_id)
    if carrier is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Carrier not found")
    return carrier


@router.post("/", response_model=CarrierResponse, status_code=status.HTTP_201_CREATED)
async def create_carrier(
    body: CarrierCreate,
    storage: StorageFacade = Depends(get_storage),
) -> CarrierResponse:
    return await storage.create_carrier(body)
