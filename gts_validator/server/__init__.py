"""FastAPI adapter over the validation engine."""

from .main import app, create_app, run

__all__ = ["app", "create_app", "run"]
