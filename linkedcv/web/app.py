"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI

from linkedcv.config import AppConfig, load_config_or_default

from .api import router as api_router
from .pages import router as pages_router


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    app = FastAPI(title="LinkedCV")
    app.state.config = config or load_config_or_default()

    app.include_router(api_router)
    app.include_router(pages_router)

    return app
