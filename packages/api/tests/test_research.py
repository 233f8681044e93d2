# This project was developed with assistance from AI tools.
"""Tests for company research (Serper search + Browserless scrape)."""

import json

import httpx
import pytest

from src.core.config import Settings
from src.services.research import (
    BROWSERLESS_API_URL,
    SERPER_API_URL,
    CompanyResearchService,
    ResearchError,
    extract_company_data,
    risk_profile_for,
)

_PAGE = """
<html><body>
<h1>Zeta Bakery</h1>
<p>Family restaurant and bakery since 1982.</p>
<p>Contact: owner@gmail.com or hello@zetabakery.ca</p>
<p>Address: 12 Main St, Victoria BC</p>
</body></html>
"""


def _settings(**overrides) -> Settings:
    values = {"SERPER_API_KEY": "serper-key", "BROWSERLESS_API_KEY": "bl-token"}
    values.update(overrides)
    return Settings(**values)


def _service(handler, **overrides) -> CompanyResearchService:
    return CompanyResearchService(_settings(**overrides), transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# Page parsing
# ---------------------------------------------------------------------------


def test_extract_prefers_business_email():
    data = extract_company_data(_PAGE, "Zeta Bakery")

    assert data["name"] == "Zeta Bakery"
    assert data["email"] == "hello@zetabakery.ca"
    assert data["address"] == "12 Main St, Victoria BC"
    assert data["business_type"] == "Restaurant"


def test_extract_returns_only_found_fields():
    """should not guess fields the page does not contain."""
    assert extract_company_data("<p>Nothing useful here</p>", "Quiet Co") == {"name": "Quiet Co"}


def test_extract_falls_back_to_free_mail_address():
    data = extract_company_data("Reach us at team@gmail.com", "Solo Co")
    assert data["email"] == "team@gmail.com"


@pytest.mark.parametrize(
    "business_type,industry",
    [
        ("Retail", "Retail"),
        ("Technology", "Technology"),
        ("Fast food Restaurant", "Food Service"),
    ],
)
def test_risk_profile_templates(business_type, industry):
    assert risk_profile_for(business_type)["industry"] == industry


@pytest.mark.parametrize("business_type", [None, "", "Healthcare"])
def test_no_risk_profile_without_template(business_type):
    assert risk_profile_for(business_type) is None


# ---------------------------------------------------------------------------
# HTTP flow
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_research_searches_then_scrapes_top_hit():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if str(request.url) == SERPER_API_URL:
            return httpx.Response(
                200,
                json={"organic": [{"title": "Zeta Bakery", "link": "https://zetabakery.ca"}]},
            )
        return httpx.Response(200, text=_PAGE)

    result = await _service(handler).research("Zeta Bakery")

    search, scrape = calls
    assert search.headers["X-API-KEY"] == "serper-key"
    assert json.loads(search.content) == {"q": "Zeta Bakery company information", "num": 10}
    assert str(scrape.url).startswith(BROWSERLESS_API_URL)
    assert scrape.url.params["token"] == "bl-token"
    assert json.loads(scrape.content) == {"url": "https://zetabakery.ca", "waitFor": 2000}

    assert result["email"] == "hello@zetabakery.ca"
    assert result["risk_profile"]["industry"] == "Food Service"


@pytest.mark.asyncio
async def test_research_without_results_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"organic": []})

    with pytest.raises(ResearchError, match="No search results"):
        await _service(handler).research("Nobody Inc")


@pytest.mark.asyncio
async def test_search_http_error_raises_research_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "bad key"})

    with pytest.raises(ResearchError, match="Search request failed"):
        await _service(handler).search("Zeta Bakery")


@pytest.mark.asyncio
async def test_scrape_http_error_raises_research_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    with pytest.raises(ResearchError, match="Scrape request failed"):
        await _service(handler).scrape("https://zetabakery.ca")


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["SERPER_API_KEY", "BROWSERLESS_API_KEY"])
async def test_missing_api_key_raises(missing):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"organic": [{"link": "https://zetabakery.ca"}]})

    with pytest.raises(ResearchError, match=missing):
        await _service(handler, **{missing: None}).research("Zeta Bakery")
