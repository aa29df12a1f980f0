"""FastAPI server adapter for the GTS validation engine."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env before importing modules that may resolve/capture settings.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(ROOT_DIR / ".env")

from ..config import get_settings
from .routers import api

settings = get_settings()
logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="Validate GTS identifiers embedded in Markdown, JSON and YAML documents",
        version="1.0.0",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("gts_validator.server.main:app", host="0.0.0.0", port=8000, reload=settings.debug)


__all__ = ["app", "create_app", "logger", "run", "settings"]
