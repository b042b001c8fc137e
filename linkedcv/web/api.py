"""JSON API routes: profile lookup, pasted-text parse, analysis, rendering."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse

from linkedcv.analysis import build_landing_context
from linkedcv.config import AppConfig
from linkedcv.errors import (
    LinkedCVError,
    ProfileNotFoundError,
    ProfileTextTooShortError,
)
from linkedcv.profile.models import ProfileRecord
from linkedcv.render.landing import render_landing_page

from . import sources
from .dependencies import get_config

logger = logging.getLogger("linkedcv.web.api")

router = APIRouter(prefix="/api")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@router.post("/scrape")
async def scrape(request: Request, config: AppConfig = Depends(get_config)):
    body = await _json_body(request)
    linkedin_url = body.get("linkedinUrl")
    if not linkedin_url or not isinstance(linkedin_url, str):
        return _error("A LinkedIn URL is required.", 400)

    try:
        profile = sources.lookup_profile(config, linkedin_url)
    except ValueError as e:
        return _error(str(e), 400)
    except ProfileNotFoundError as e:
        return _error(str(e), 404)
    except LinkedCVError as e:
        return _error(str(e), 500)

    return {"data": profile.to_dict()}


@router.post("/parse")
async def parse(request: Request, config: AppConfig = Depends(get_config)):
    body = await _json_body(request)
    text = body.get("linkedinText")
    if not isinstance(text, str):
        text = ""

    try:
        profile = sources.parse_pasted_profile(config, text)
    except ProfileTextTooShortError as e:
        return _error(str(e), 400)
    except LinkedCVError as e:
        return _error(str(e), 500)
    except Exception as e:
        logger.exception("Profile parse failed")
        return _error(str(e) or "Something went wrong.", 500)

    return {"data": profile.to_dict()}


async def _profile_body(request: Request) -> Optional[ProfileRecord]:
    """Read a profile record posted bare or wrapped as ``{"data": {...}}``."""
    body = await _json_body(request)
    record = body.get("data", body)
    if not record or not isinstance(record, dict):
        return None
    return ProfileRecord.from_dict(record)


@router.post("/analyze")
async def analyze(request: Request):
    profile = await _profile_body(request)
    if profile is None:
        return _error("A profile record is required.", 400)
    return build_landing_context(profile)


@router.post("/render", response_class=HTMLResponse)
async def render(request: Request):
    profile = await _profile_body(request)
    if profile is None:
        return _error("A profile record is required.", 400)
    return HTMLResponse(render_landing_page(profile))
