"""Application factory for the budgetcore API.

This module configures logging, creates the database tables on startup, mounts the API router and exposes the
Scalar API reference endpoint for interactive OpenAPI documentation.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from scalar_fastapi import get_scalar_api_reference
from sqlalchemy.exc import SQLAlchemyError

from budgetcore.api.routes import router
from budgetcore.core.db import Base, engine
from budgetcore.core.settings import get_settings
from budgetcore.core.utils import get_logger


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure console logging and, when a log file is configured, a plain file handler."""
    settings = get_settings()
    logger = get_logger("budgetcore")
    logger.setLevel(settings.log_level)
    if settings.log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setLevel(settings.log_level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    logger.propagate = False


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan event handler that creates the budget, category and transaction tables."""
    _ = app
    logger = get_logger("budgetcore")
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError:
        logger.exception("Failed to create budgetcore tables")
        raise
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="budgetcore API",
    description="""
    The budgetcore API creates budgets from built-in templates and serves filtered, grouped views of their
    transactions.

    **Endpoints:**
    - `GET /templates`: List templates with previews.
    - `GET /templates/{template_id}`: Preview one template.
    - `POST /budgets`: Create a budget, optionally from a template.
    - `POST /budgets/{budget_id}/templates/{template_id}`: Apply a template to an existing budget.
    - `GET /budgets/{budget_id}/transactions`: Filter, group and aggregate transactions.
    - `GET /budgets/{budget_id}/summary`: Planned versus actual totals.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> HTMLResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)
