"""Main entrypoint for running the budgetcore API with Uvicorn."""

import uvicorn

from budgetcore.core.settings import get_settings
from budgetcore.main import app  # noqa: F401

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("budgetcore.main:app", host=settings.server_host, port=settings.server_port, reload=True)
