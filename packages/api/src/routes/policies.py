# This project was developed with assistance from AI tools.
"""Policy routes."""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..schemas.policy import PolicyCreate, PolicyResponse, PolicyUpdate
from ..services.storage import StorageFacade, get_storage

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Policy not found")


@router.get("/{policy_id}", response_model=PolicyResponse)
async def get_policy(
    policy_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> PolicyResponse:
    policy = await storage.get_policy(policy_id)
    if policy is None:
        raise _not_found()
    return policy


@router.post("/", response_model=PolicyResponse, status_code=status.HTTP_201_CREATED)
async def create_policy(
    body: PolicyCreate,
    storage: StorageFacade = Depends(get_storage),
) -> PolicyResponse:
    if body.end_date < body.start_date:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end_date must not be before start_date",
        )
    return await storage.create_policy(body)


@router.patch("/{policy_id}", response_model=PolicyResponse)
async def update_policy(
    policy_id: int,
    body: PolicyUpdate,
    storage: StorageFacade = Depends(get_storage),
) -> PolicyResponse:
    policy = await storage.update_policy(policy_id, body.model_dump(exclude_unset=True))
    if policy is None:
        raise _not_found()
    return policy


@router.delete("/{policy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_policy(
    policy_id: int,
    storage: StorageFacade = Depends(get_storage),
) -> Response:
    if not await storage.delete_policy(policy_id):
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
