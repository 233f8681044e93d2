# This project was developed with assistance from AI tools.
"""Tests for the BrokerGPT assistant service."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from openai import APITimeoutError, RateLimitError

from src.core.config import settings
from src.inference import RateLimitCooldown
from src.schemas.chat import ChatMessageResponse
from src.schemas.conversation import ConversationMessage
from src.services.assistant import (
    EMPTY_REPLY,
    ERROR_REPLY,
    EXTRACTION_ERROR,
    HIGH_DEMAND_REPLY,
    RATE_LIMITED_ERROR,
    RECOMMENDATION_ERROR,
    SYSTEM_PROMPT,
    TIMEOUT_REPLY,
    AssistantService,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _rate_limit_error(retry_after: str | None = None) -> RateLimitError:
    headers = {"retry-after": retry_after} if retry_after else {}
    response = httpx.Response(429, headers=headers, request=_REQUEST)
    return RateLimitError("Rate limit exceeded", response=response, body=None)


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def assistant(offline_storage, clock):
    return AssistantService(offline_storage, settings, cooldown=RateLimitCooldown(clock=clock))


def _history(*contents: str) -> list[ChatMessageResponse]:
    return [
        ChatMessageResponse(id=i, role="user", content=text) for i, text in enumerate(contents, 1)
    ]


# ---------------------------------------------------------------------------
# generate_reply
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_reply_sends_system_prompt_and_history(assistant):
    with patch(
        "src.services.assistant.get_completion", new=AsyncMock(return_value="  Try Acme.  ")
    ) as mock_completion:
        reply = await assistant.generate_reply(_history("Who covers retail?"))

    assert reply == "Try Acme."
    messages = mock_completion.await_args.args[0]
    assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert messages[-1] == {"role": "user", "content": "Who covers retail?"}
    assert mock_completion.await_args.kwargs["task"] == "chat"


@pytest.mark.asyncio
async def test_reply_includes_client_context(assistant, offline_storage):
    """should add a second system message describing the selected client."""
    client = await offline_storage.get_client(3)
    with patch(
        "src.services.assistant.get_completion", new=AsyncMock(return_value="ok")
    ) as mock_completion:
        await assistant.generate_reply(_history("Any cyber options?"), client)

    context = mock_completion.await_args.args[0][1]
    assert context["role"] == "system"
    assert "Beta Technologies" in context["content"]
    assert "Burnaby" in context["content"]


@pytest.mark.asyncio
async def test_empty_completion_returns_apology(assistant):
    with patch("src.services.assistant.get_completion", new=AsyncMock(return_value="")):
        assert await assistant.generate_reply(_history("hi")) == EMPTY_REPLY


@pytest.mark.asyncio
async def test_timeout_returns_timeout_reply(assistant):
    error = APITimeoutError(request=_REQUEST)
    with patch("src.services.assistant.get_completion", new=AsyncMock(side_effect=error)):
        assert await assistant.generate_reply(_history("hi")) == TIMEOUT_REPLY
    assert not assistant.cooldown.active


@pytest.mark.asyncio
async def test_unexpected_error_returns_error_reply(assistant):
    with patch(
        "src.services.assistant.get_completion", new=AsyncMock(side_effect=RuntimeError("boom"))
    ):
        assert await assistant.generate_reply(_history("hi")) == ERROR_REPLY


@pytest.mark.asyncio
async def test_rate_limit_opens_cooldown(assistant, clock):
    """should stop calling the provider until the retry-after window passes."""
    mock_completion = AsyncMock(side_effect=[_rate_limit_error("30"), "back again"])
    with patch("src.services.assistant.get_completion", new=mock_completion):
        assert await assistant.generate_reply(_history("hi")) == HIGH_DEMAND_REPLY
        assert await assistant.generate_reply(_history("hi")) == HIGH_DEMAND_REPLY
        assert mock_completion.await_count == 1

        clock.now += 31
        assert await assistant.generate_reply(_history("hi")) == "back again"
        assert mock_completion.await_count == 2


@pytest.mark.asyncio
async def test_rate_limit_without_header_uses_configured_cooldown(offline_storage, clock, monkeypatch):
    monkeypatch.setattr(settings, "RATE_LIMIT_COOLDOWN", 45.0)
    assistant = AssistantService(offline_storage, settings, cooldown=RateLimitCooldown(clock=clock))
    with patch(
        "src.services.assistant.get_completion", new=AsyncMock(side_effect=_rate_limit_error())
    ):
        await assistant.generate_reply(_history("hi"))

    assert assistant.cooldown.remaining() == 45.0


# ---------------------------------------------------------------------------
# extract_profile / apply_profile
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_extract_profile_returns_model_json(assistant):
    profile = {"name": "Zeta Bakery", "business_type": "Restaurant", "employees": 12}
    with patch(
        "src.services.assistant.get_json_completion", new=AsyncMock(return_value=profile)
    ) as mock_json:
        result = await assistant.extract_profile(
            [ConversationMessage(role="user", content="We run Zeta Bakery with 12 staff")]
        )

    assert result == profile
    messages = mock_json.await_args.args[0]
    assert messages[0] == {"role": "user", "content": "We run Zeta Bakery with 12 staff"}
    assert messages[-1]["role"] == "system"
    assert mock_json.await_args.kwargs["task"] == "profile_extraction"


@pytest.mark.asyncio
async def test_extract_profile_invalid_json_returns_error(assistant):
    with patch(
        "src.services.assistant.get_json_completion",
        new=AsyncMock(side_effect=ValueError("LLM returned non-JSON")),
    ):
        assert await assistant.extract_profile(_history("hi")) == {"error": EXTRACTION_ERROR}


@pytest.mark.asyncio
async def test_extract_profile_rate_limited(assistant):
    with patch(
        "src.services.assistant.get_json_completion",
        new=AsyncMock(side_effect=_rate_limit_error("10")),
    ):
        assert await assistant.extract_profile(_history("hi")) == {"error": RATE_LIMITED_ERROR}
    assert assistant.cooldown.active


@pytest.mark.asyncio
async def test_apply_profile_updates_known_non_null_fields(assistant, offline_storage):
    updated = await assistant.apply_profile(
        2, {"employees": 175, "city": None, "favourite_colour": "blue"}
    )

    assert updated.employees == 175
    assert updated.city == "Vancouver"
    assert (await offline_storage.get_client(2)).employees == 175


@pytest.mark.asyncio
async def test_apply_profile_rejects_invalid_values(assistant, offline_storage):
    assert await assistant.apply_profile(2, {"employees": "lots"}) is None
    assert (await offline_storage.get_client(2)).employees == 150


# ---------------------------------------------------------------------------
# recommend_carriers
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_recommendations_rank_only_matching_carriers(assistant):
    """should send the risk-filtered candidates to the ranking task."""
    ranked = {"recommendations": [{"carrier_id": 1, "name": "Acme Insurance", "rank": 1}]}
    with patch(
        "src.services.assistant.get_json_completion", new=AsyncMock(return_value=ranked)
    ) as mock_json:
        result = await assistant.recommend_carriers(
            {"name": "Gamma Retail Group", "risk_profile": {"industry": "Retail"}}
        )

    assert result == ranked
    prompt = mock_json.await_args.args[0][1]["content"]
    assert "Acme Insurance" in prompt
    assert "Liberty Shield" not in prompt
    assert mock_json.await_args.kwargs["task"] == "carrier_ranking"


@pytest.mark.asyncio
async def test_recommendations_failure_returns_empty_list(assistant):
    with patch(
        "src.services.assistant.get_json_completion",
        new=AsyncMock(side_effect=RuntimeError("provider down")),
    ):
        result = await assistant.recommend_carriers({"risk_profile": {}})

    assert result == {"recommendations": [], "error": RECOMMENDATION_ERROR}


@pytest.mark.asyncio
async def test_recommendations_skip_provider_during_cooldown(assistant):
    assistant.cooldown.trip(30)
    mock_json = AsyncMock()
    with patch("src.services.assistant.get_json_completion", new=mock_json):
        result = await assistant.recommend_carriers({"risk_profile": {"industry": "Retail"}})

    assert result == {"recommendations": [], "error": RATE_LIMITED_ERROR}
    mock_json.assert_not_awaited()
