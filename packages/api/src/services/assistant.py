# This project was developed with assistance from AI tools.
"""BrokerGPT assistant: chat replies, profile extraction, carrier ranking.

None of these calls raise on provider trouble. Chat replies degrade to a
fixed apology; extraction and ranking return an ``error`` key instead of a
result. A 429 opens a cool-down window during which the provider is not
contacted at all.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any, Protocol

from fastapi import Request
from openai import APITimeoutError, RateLimitError
from pydantic import ValidationError

from ..core.config import Settings
from ..inference import RateLimitCooldown, get_completion, get_json_completion, retry_after_seconds
from ..schemas.client import ClientResponse, ClientUpdate
from .storage import StorageFacade

logger = logging.getLogger(__name__)

HIGH_DEMAND_REPLY = "I'm currently experiencing high demand. Please try again in a few moments."
TIMEOUT_REPLY = (
    "I'm sorry, but the request timed out. This might be due to high server load. "
    "Please try again shortly."
)
ERROR_REPLY = "I'm sorry, but I encountered an error processing your request. Please try again later."
EMPTY_REPLY = "I'm sorry, I couldn't generate a response at this time."

RATE_LIMITED_ERROR = "Rate limited. Please try again later."
EXTRACTION_ERROR = "Failed to extract client profile"
RECOMMENDATION_ERROR = "Failed to generate carrier recommendations"

SYSTEM_PROMPT = (
    "You are BrokerGPT, an AI assistant specializing in insurance brokerage. "
    "You help insurance agents find the best carriers for their clients based on risk profiles. "
    "Be professional, knowledgeable, and helpful. If you don't know something, say so honestly. "
    "Always provide accurate information about insurance policies, carriers, and risk management."
)

EXTRACTION_PROMPT = (
    "Based on the conversation history, extract a client profile as a JSON object with the "
    "fields: name, address, city, province, postal_code, phone, email, business_type, "
    "annual_revenue, employees, risk_profile (an object with industry, hazards, "
    "safetyMeasures and any other relevant risk factors). Use null for unknown fields. "
    "Only respond with the JSON object."
)

RANKING_PROMPT = (
    "You are an insurance specialist. Based on the client profile and the potential carriers, "
    "rank the top 3 carriers that best match the client's needs and explain why each is a "
    "good fit. Consider the client's industry, size, location, and specific risks. Respond "
    'with a JSON object {"recommendations": [...]} where each item has carrier_id, name, '
    "rank, and explanation."
)


class ChatTurn(Protocol):
    role: Any
    content: str


def _role(message: ChatTurn) -> str:
    role = message.role
    return getattr(role, "value", role)


def _client_context(client: ClientResponse) -> str:
    return (
        f"The current client is {client.name}, a {client.business_type or 'unspecified'} "
        f"business located in {client.city or 'an unknown city'}, "
        f"{client.province or 'unknown province'}. They have {client.employees or 'an unknown number of'} "
        f"employees and annual revenue of ${client.annual_revenue or 0}. "
        "Keep this information in mind when answering queries."
    )


class AssistantService:
    """LLM-backed helpers with a shared rate-limit cool-down."""

    def __init__(
        self,
        storage: StorageFacade,
        cfg: Settings,
        cooldown: RateLimitCooldown | None = None,
    ):
        self._storage = storage
        self._cooldown_seconds = cfg.RATE_LIMIT_COOLDOWN
        self.cooldown = cooldown or RateLimitCooldown()

    def _record_rate_limit(self, exc: RateLimitError) -> None:
        self.cooldown.trip(retry_after_seconds(exc, self._cooldown_seconds))

    async def generate_reply(
        self,
        history: Iterable[ChatTurn],
        client: ClientResponse | None = None,
    ) -> str:
        """Answer the latest user turn. Always returns text."""
        if self.cooldown.active:
            logger.warning("Chat reply skipped, provider cool-down active")
            return HIGH_DEMAND_REPLY

        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        if client is not None:
            messages.append({"role": "system", "content": _client_context(client)})
        messages.extend({"role": _role(m), "content": m.content} for m in history)

        try:
            content = await get_completion(messages, task="chat")
        except RateLimitError as exc:
            self._record_rate_limit(exc)
            return HIGH_DEMAND_REPLY
        except APITimeoutError:
            logger.warning("Chat completion timed out")
            return TIMEOUT_REPLY
        except Exception:
            logger.exception("Chat completion failed")
            return ERROR_REPLY

        return content.strip() or EMPTY_REPLY

    async def extract_profile(self, history: Iterable[ChatTurn]) -> dict[str, Any]:
        """Structured client profile from a conversation, or ``{"error": ...}``."""
        if self.cooldown.active:
            logger.warning("Profile extraction skipped, provider cool-down active")
            return {"error": RATE_LIMITED_ERROR}

        messages = [{"role": _role(m), "content": m.content} for m in history]
        messages.append({"role": "system", "content": EXTRACTION_PROMPT})
        try:
            return await get_json_completion(messages, task="profile_extraction")
        except RateLimitError as exc:
            self._record_rate_limit(exc)
            return {"error": RATE_LIMITED_ERROR}
        except Exception:
            logger.exception("Profile extraction failed")
            return {"error": EXTRACTION_ERROR}

    async def apply_profile(self, client_id: int, profile: dict[str, Any]) -> ClientResponse | None:
        """Write the non-null extracted fields onto an existing client."""
        known = {k: v for k, v in profile.items() if k in ClientUpdate.model_fields and v is not None}
        try:
            changes = ClientUpdate.model_validate(known).model_dump(exclude_unset=True)
        except ValidationError:
            logger.warning("Extracted profile for client %s failed validation, not applied", client_id)
            return None
        return await self._storage.update_client(client_id, changes)

    async def recommend_carriers(self, profile: dict[str, Any]) -> dict[str, Any]:
        """Rank candidate carriers for ``profile``, or ``{"recommendations": [], "error": ...}``."""
        candidates = await self._storage.get_carriers_by_risk_profile(
            profile.get("risk_profile") or {}
        )

        if self.cooldown.active:
            logger.warning("Carrier ranking skipped, provider cool-down active")
            return {"recommendations": [], "error": RATE_LIMITED_ERROR}

        messages = [
            {"role": "system", "content": RANKING_PROMPT},
            {
                "role": "user",
                "content": (
                    f"Client Profile: {json.dumps(profile, default=str)}\n\n"
                    "Potential Carriers: "
                    f"{json.dumps([c.model_dump(mode='json') for c in candidates])}"
                ),
            },
        ]
        try:
            return await get_json_completion(messages, task="carrier_ranking")
        except RateLimitError as exc:
            self._record_rate_limit(exc)
            return {"recommendations": [], "error": RATE_LIMITED_ERROR}
        except Exception:
            logger.exception("Carrier ranking failed")
            return {"recommendations": [], "error": RECOMMENDATION_ERROR}


def get_assistant(request: Request) -> AssistantService:
    """FastAPI dependency returning the assistant built in the app lifespan."""
    return request.app.state.assistant
