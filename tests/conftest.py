"""Shared fixtures: an in-memory database, a store, a template service and an API client bound to them."""

import os
from collections.abc import Generator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.engine import Engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from budgetcore.api.dependencies import get_db_store  # noqa: E402
from budgetcore.core.db import Base, BudgetStore  # noqa: E402
from budgetcore.main import app  # noqa: E402
from budgetcore.services.template_service import TemplateService  # noqa: E402


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared across threads, with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to the in-memory engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def store(session_factory: sessionmaker) -> Generator[BudgetStore, None, None]:
    """A BudgetStore on its own session."""
    store = BudgetStore(session_factory())
    yield store
    store.close()


@pytest.fixture
def service(store: BudgetStore) -> TemplateService:
    """A TemplateService bound to the in-memory store."""
    return TemplateService(store)


@pytest.fixture
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """API client whose requests use the in-memory database."""

    def _store() -> Generator[BudgetStore, None, None]:
        store = BudgetStore(session_factory())
        try:
            yield store
        finally:
            store.close()

    app.dependency_overrides[get_db_store] = _store
    yield TestClient(app)
    app.dependency_overrides.clear()
