"""API package: provides FastAPI dependencies and route definitions for the application."""

from .dependencies import get_db_store, get_template_service  # noqa: F401
from .routes import router  # noqa: F401
