"""Jinja2 rendering of the input form and the generated landing page."""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from linkedcv.analysis import build_landing_context
from linkedcv.profile.models import ProfileRecord

logger = logging.getLogger("linkedcv.render")

TEMPLATES_DIR = Path(__file__).parent / "templates"

SKILL_COLORS = ["blue", "indigo", "violet", "sky", "cyan"]

_env: Optional[Environment] = None


def get_environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=True,
        )
    return _env


def render_landing_page(profile: ProfileRecord) -> str:
    """Render the full landing page HTML for ``profile``."""
    context = build_landing_context(profile)
    template = get_environment().get_template("landing.html")
    html = template.render(
        cv=profile,
        skill_colors=SKILL_COLORS,
        **context,
    )
    logger.debug("Rendered landing page for %s (%d bytes)", profile.name, len(html))
    return html


def render_index_page(error: Optional[str] = None, mode: str = "url", value: str = "") -> str:
    """Render the input form, optionally with an error message."""
    template = get_environment().get_template("index.html")
    return template.render(error=error, mode=mode if mode in ("url", "paste") else "url", value=value)
