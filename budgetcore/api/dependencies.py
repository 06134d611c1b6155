"""FastAPI dependencies for DI (settings, store, template service).

This module provides dependency injection helpers so API endpoints receive a per-request BudgetStore and the
services built on it, which keeps the endpoints testable with an in-memory database.
"""

from collections.abc import Generator

from fastapi import Depends

from budgetcore.core.db import BudgetStore, get_store
from budgetcore.services.template_service import TemplateService


def get_db_store() -> Generator[BudgetStore, None, None]:
    """Provide a BudgetStore for one request and close its session afterwards."""
    store = get_store()
    try:
        yield store
    finally:
        store.close()


def get_template_service(store: BudgetStore = Depends(get_db_store)) -> TemplateService:
    """Provide a TemplateService bound to the request's store."""
    return TemplateService(store)
