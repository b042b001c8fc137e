"""LinkedIn profile lookup through a Proxycurl-compatible API."""

import calendar
import logging
from typing import Any, Mapping, Optional

import requests

from linkedcv.config import DEFAULT_LOOKUP_ENDPOINT
from linkedcv.errors import ProfileLookupError, ProfileNotFoundError
from linkedcv.profile.models import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ProfileRecord,
    RoleEntry,
)
from linkedcv.utils.http_client import create_session

logger = logging.getLogger("linkedcv.profile.linkedin")

PROFILE_URL_PREFIX = "https://www.linkedin.com/in/"


def normalize_linkedin_url(value: str) -> str:
    """Turn a profile URL or bare username into a full profile URL."""
    url = (value or "").strip()
    if not url:
        raise ValueError("A LinkedIn URL is required.")
    if not url.startswith("http"):
        url = PROFILE_URL_PREFIX + url.lstrip("/")
    if "linkedin.com/in/" not in url:
        raise ValueError(
            "Please enter a valid LinkedIn profile URL (linkedin.com/in/username)."
        )
    return url


def _format_date(d: Optional[Mapping]) -> Optional[str]:
    if not d or not d.get("year"):
        return None
    try:
        month = int(d.get("month") or 0)
    except (TypeError, ValueError):
        month = 0
    if not 1 <= month <= 12:
        return str(d["year"])
    return f"{calendar.month_abbr[month]} {d['year']}"


def format_date_range(start: Optional[Mapping], end: Optional[Mapping]) -> str:
    """Render e.g. "Jan 2020 – Present" from {year, month} mappings."""
    s = _format_date(start)
    if not s:
        return ""
    e = _format_date(end) or "Present"
    return f"{s} – {e}"


def _join(*parts: Any, sep: str = " ") -> str:
    return sep.join(str(p) for p in parts if p)


def map_lookup_response(payload: Mapping, url: str) -> ProfileRecord:
    """Map a lookup-service payload onto a ProfileRecord."""
    personal_emails = payload.get("personal_emails") or []
    websites = payload.get("personal_websites") or []
    website = ""
    if websites and isinstance(websites[0], Mapping):
        website = websites[0].get("url") or ""

    experience = [
        RoleEntry(
            title=e.get("title") or "",
            company=e.get("company") or "",
            duration=format_date_range(e.get("starts_at"), e.get("ends_at")),
            location=e.get("location") or "",
            description=e.get("description") or "",
        )
        for e in payload.get("experiences") or []
    ]

    education = [
        EducationEntry(
            degree=e.get("degree_name") or "Degree",
            school=e.get("school") or "",
            years=format_date_range(e.get("starts_at"), e.get("ends_at")),
            field=e.get("field_of_study") or "",
        )
        for e in payload.get("education") or []
    ]

    skills = []
    for s in payload.get("skills") or []:
        name = s if isinstance(s, str) else (s or {}).get("name")
        if name:
            skills.append(name)

    certifications = []
    for c in payload.get("certifications") or []:
        starts_at = c.get("starts_at") or {}
        certifications.append(CertificationEntry(
            name=c.get("name") or "",
            issuer=c.get("authority") or "",
            date=str(starts_at["year"]) if starts_at.get("year") else "",
        ))

    return ProfileRecord(
        name=_join(payload.get("first_name"), payload.get("last_name")) or "Unknown",
        headline=payload.get("headline") or payload.get("occupation") or "",
        location=_join(
            payload.get("city"), payload.get("state"), payload.get("country_full_name"), sep=", "
        ),
        about=payload.get("summary") or "",
        photo_url=payload.get("profile_pic_url") or "",
        contact=ContactInfo(
            email=(personal_emails[0] if personal_emails else "") or payload.get("work_email") or "",
            website=website,
            linkedin=url,
        ),
        experience=experience,
        education=education,
        skills=skills,
        certifications=certifications,
    )


def fetch_linkedin_profile(
    linkedin_url: str,
    api_key: str,
    session: Optional[requests.Session] = None,
    endpoint: str = DEFAULT_LOOKUP_ENDPOINT,
    timeout: int = 30,
) -> ProfileRecord:
    """Fetch a public profile from the lookup service.

    Raises ValueError for a malformed URL, ProfileNotFoundError when the
    profile is missing or private, and ProfileLookupError for anything else.
    """
    url = normalize_linkedin_url(linkedin_url)
    if not api_key:
        raise ProfileLookupError("Proxycurl API key not configured on server.")

    if session is None:
        with create_session() as owned:
            return fetch_linkedin_profile(url, api_key, owned, endpoint, timeout)

    try:
        response = session.get(
            endpoint,
            params={"url": url, "skills": "include", "extra": "include"},
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.warning("Profile lookup failed for %s: %s", url, e)
        raise ProfileLookupError(f"Failed to fetch LinkedIn profile: {e}") from e

    if response.status_code == 404:
        raise ProfileNotFoundError("LinkedIn profile not found or is private.")
    if response.status_code == 401:
        raise ProfileLookupError("Invalid Proxycurl API key.")
    if not response.ok:
        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail") if isinstance(body, Mapping) else None
        logger.warning("Profile lookup returned %d for %s", response.status_code, url)
        raise ProfileLookupError(detail or "Failed to fetch LinkedIn profile.")

    try:
        payload = response.json()
    except ValueError as e:
        raise ProfileLookupError("Profile lookup returned an invalid response.") from e

    profile = map_lookup_response(payload, url)
    logger.info(
        "Fetched LinkedIn profile: %s (%d roles, %d skills)",
        profile.name,
        len(profile.experience),
        len(profile.skills),
    )
    return profile
