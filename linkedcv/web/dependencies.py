"""Shared FastAPI dependencies."""

from fastapi import Request

from linkedcv.config import AppConfig


def get_config(request: Request) -> AppConfig:
    return request.app.state.config
