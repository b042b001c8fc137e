"""HTML routes: the input form and form-driven page generation."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from linkedcv.config import AppConfig
from linkedcv.errors import LinkedCVError, ProfileNotFoundError
from linkedcv.render.landing import render_index_page, render_landing_page

from . import sources
from .dependencies import get_config

logger = logging.getLogger("linkedcv.web.pages")

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index():
    return HTMLResponse(render_index_page())


@router.post("/generate", response_class=HTMLResponse)
async def generate(request: Request, config: AppConfig = Depends(get_config)):
    form = await request.form()
    mode = form.get("mode", "url")
    value = (form.get("linkedin_text") if mode == "paste" else form.get("linkedin_url")) or ""
    value = value.strip()

    if not value:
        message = "Please paste your profile text." if mode == "paste" else "A LinkedIn URL is required."
        return HTMLResponse(render_index_page(error=message, mode=mode), status_code=400)

    try:
        if mode == "paste":
            profile = sources.parse_pasted_profile(config, value)
        else:
            profile = sources.lookup_profile(config, value)
    except ValueError as e:
        return HTMLResponse(render_index_page(error=str(e), mode=mode, value=value), status_code=400)
    except ProfileNotFoundError as e:
        return HTMLResponse(render_index_page(error=str(e), mode=mode, value=value), status_code=404)
    except LinkedCVError as e:
        logger.warning("Profile generation failed: %s", e)
        return HTMLResponse(render_index_page(error=str(e), mode=mode, value=value), status_code=502)
    except Exception:
        logger.exception("Unexpected error generating landing page")
        return HTMLResponse(
            render_index_page(error="Something went wrong.", mode=mode, value=value),
            status_code=502,
        )

    return HTMLResponse(render_landing_page(profile))
