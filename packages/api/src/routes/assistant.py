# This project was developed with assistance from AI tools.
"""Assistant tool routes: profile extraction, carrier recommendations, company research."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.assistant import (
    ExtractProfileRequest,
    RecommendCarriersRequest,
    ResearchCompanyRequest,
)
from ..services.assistant import AssistantService, get_assistant
from ..services.research import CompanyResearchService, ResearchError, get_research_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/extract-profile")
async def extract_profile(
    body: ExtractProfileRequest,
    assistant: AssistantService = Depends(get_assistant),
) -> dict[str, Any]:
    """Extract a client profile from the conversation.

    When ``client_id`` is given and extraction succeeds, the extracted fields
    are written to that client and the updated client is returned under
    ``client``.
    """
    profile = await assistant.extract_profile(body.messages)
    if "error" in profile or body.client_id is None:
        return profile

    updated = await assistant.apply_profile(body.client_id, profile)
    if updated is None:
        return {**profile, "client": None}
    return {**profile, "client": updated.model_dump(mode="json")}


@router.post("/recommend-carriers")
async def recommend_carriers(
    body: RecommendCarriersRequest,
    assistant: AssistantService = Depends(get_assistant),
) -> dict[str, Any]:
    return await assistant.recommend_carriers(body.profile)


@router.post("/research-company")
async def research_company(
    body: ResearchCompanyRequest,
    research: CompanyResearchService = Depends(get_research_service),
) -> dict[str, Any]:
    """Partial client profile gathered from the web for ``company_name``."""
    try:
        return await research.research(body.company_name)
    except ResearchError as exc:
        logger.warning("Company research failed for %s: %s", body.company_name, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to research company: {exc}",
        ) from exc
