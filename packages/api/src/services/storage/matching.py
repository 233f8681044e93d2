# This project was developed with assistance from AI tools.
"""Carrier risk-appetite filter shared by both stores."""

from typing import Any


def _as_number(value: Any) -> float | None:
    """Numeric value of ``value``, accepting numeric strings; ``None`` otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def carrier_matches_risk_profile(
    risk_appetite: dict[str, Any] | None,
    profile: dict[str, Any],
) -> bool:
    """Return False when the carrier's appetite rules the profile out.

    A carrier is rejected when it lists ``industries`` that do not include the
    profile's ``industry``, or when its ``company_size.max`` is below the
    profile's ``size``. Missing keys on either side never reject, and neither
    do values of the wrong shape (a non-list ``industries``, a non-numeric
    size). Numeric strings count as numbers.

    Examples:
        >>> carrier_matches_risk_profile({"industries": ["Construction"]}, {"industry": "Retail"})
        False
        >>> carrier_matches_risk_profile({}, {"industry": "Retail"})
        True
        >>> carrier_matches_risk_profile({"company_size": {"min": 1, "max": 200}}, {"size": 250})
        False
        >>> carrier_matches_risk_profile({"company_size": {"max": "500"}}, {"size": "50"})
        True
    """
    appetite = risk_appetite if isinstance(risk_appetite, dict) else {}
    if not isinstance(profile, dict):
        profile = {}

    industry = profile.get("industry")
    industries = appetite.get("industries")
    if industry and isinstance(industries, list | tuple) and industry not in industries:
        return False

    size = _as_number(profile.get("size"))
    company_size = appetite.get("company_size")
    if size and isinstance(company_size, dict):
        max_size = _as_number(company_size.get("max"))
        if max_size is not None and size > max_size:
            return False

    return True
