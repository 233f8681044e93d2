# This project was developed with assistance from AI tools.
"""Company research: web search, scrape the top hit, pull out profile fields.

Only fields actually found on the page are returned; nothing is guessed.
"""

import logging
import re
from typing import Any

import httpx

from ..core.config import Settings, settings

logger = logging.getLogger(__name__)

SERPER_API_URL = "https://google.serper.dev/search"
BROWSERLESS_API_URL = "https://chrome.browserless.io/content"

_EMAIL_RE = re.compile(r"([a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+)")
_ADDRESS_RE = re.compile(r"(?:address|location):\s*([^<\n]+)", re.IGNORECASE)
_UNLIKELY_EMAIL_DOMAINS = ("gmail.com", "yahoo.com", "hotmail.com", "example.com")

BUSINESS_TYPES = [
    "Restaurant",
    "Retail",
    "Manufacturing",
    "Technology",
    "Healthcare",
    "Construction",
    "Finance",
    "Education",
    "Professional Services",
    "Transportation",
    "Real Estate",
]

RISK_PROFILE_TEMPLATES: dict[str, dict[str, Any]] = {
    "Restaurant": {
        "industry": "Food Service",
        "hazards": ["Kitchen Equipment", "Food Safety", "Slip and Fall"],
        "safetyMeasures": ["Regular Inspections", "Staff Training"],
    },
    "Retail": {
        "industry": "Retail",
        "hazards": ["Theft", "Property Damage", "Liability Claims"],
        "safetyMeasures": ["Security Systems", "Safety Protocols"],
    },
    "Manufacturing": {
        "industry": "Manufacturing",
        "hazards": ["Machinery Accidents", "Chemical Exposure", "Repetitive Stress"],
        "safetyMeasures": ["PPE Requirements", "Safety Training", "Regular Maintenance"],
    },
    "Technology": {
        "industry": "Technology",
        "hazards": ["Cyber Threats", "Intellectual Property", "Business Interruption"],
        "safetyMeasures": ["Cyber Security", "Backup Systems", "IP Protection"],
    },
}


class ResearchError(Exception):
    """Company research could not produce a profile."""


def extract_company_data(html: str, company_name: str) -> dict[str, Any]:
    """Pull email, address and business type out of scraped page content."""
    data: dict[str, Any] = {"name": company_name}

    emails = _EMAIL_RE.findall(html)
    if emails:
        preferred = [e for e in emails if not any(d in e for d in _UNLIKELY_EMAIL_DOMAINS)]
        data["email"] = (preferred or emails)[0]

    address = _ADDRESS_RE.search(html)
    if address and address.group(1).strip():
        data["address"] = address.group(1).strip()

    for business_type in BUSINESS_TYPES:
        if re.search(rf"\b{re.escape(business_type)}\b", html, re.IGNORECASE):
            data["business_type"] = business_type
            break

    return data


def risk_profile_for(business_type: str | None) -> dict[str, Any] | None:
    """Template risk profile: exact business type first, then substring match."""
    if not business_type:
        return None
    if business_type in RISK_PROFILE_TEMPLATES:
        return dict(RISK_PROFILE_TEMPLATES[business_type])
    for name, profile in RISK_PROFILE_TEMPLATES.items():
        if name in business_type:
            return dict(profile)
    return None


class CompanyResearchService:
    """Serper search + Browserless scrape."""

    def __init__(self, cfg: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._serper_key = cfg.SERPER_API_KEY
        self._browserless_key = cfg.BROWSERLESS_API_KEY
        self._timeout = cfg.RESEARCH_TIMEOUT
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    async def search(self, company_name: str) -> list[dict[str, str]]:
        if not self._serper_key:
            raise ResearchError("SERPER_API_KEY is not set")
        async with self._client() as http:
            try:
                response = await http.post(
                    SERPER_API_URL,
                    headers={"X-API-KEY": self._serper_key},
                    json={"q": f"{company_name} company information", "num": 10},
                )
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                raise ResearchError(f"Search request failed: {exc}") from exc
        return [
            {"title": r.get("title", ""), "link": r.get("link", ""), "snippet": r.get("snippet", "")}
            for r in payload.get("organic") or []
        ]

    async def scrape(self, url: str) -> str:
        if not self._browserless_key:
            raise ResearchError("BROWSERLESS_API_KEY is not set")
        async with self._client() as http:
            try:
                response = await http.post(
                    BROWSERLESS_API_URL,
                    params={"token": self._browserless_key},
                    json={"url": url, "waitFor": 2000},
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise ResearchError(f"Scrape request failed: {exc}") from exc
        return response.text

    async def research(self, company_name: str) -> dict[str, Any]:
        """Build a partial client profile for ``company_name`` from the web.

        Raises:
            ResearchError: missing API keys, HTTP failure, or no search results.
        """
        results = await self.search(company_name)
        if not results or not results[0]["link"]:
            raise ResearchError(f"No search results found for {company_name}")

        top = results[0]["link"]
        logger.info("Researching %s via %s", company_name, top)
        html = await self.scrape(top)

        data = extract_company_data(html, company_name)
        risk_profile = risk_profile_for(data.get("business_type"))
        if risk_profile:
            data["risk_profile"] = risk_profile
        return data


def get_research_service() -> CompanyResearchService:
    return CompanyResearchService(settings)
