"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from job_postings.api.app import create_app
from job_postings.handlers import JobHandler
from job_postings.repositories import SqlJobStore, init_database
from job_postings.services import JobCache, JobService
from tests.fakes import FakeClock, InMemoryCacheStore


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine():
    """In-memory SQLite shared across threads (TestClient runs sync routes in a pool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def job_store(engine) -> SqlJobStore:
    return SqlJobStore.create(engine=engine)


@pytest.fixture
def cache_store(clock) -> InMemoryCacheStore:
    return InMemoryCacheStore(clock=clock)


@pytest.fixture
def job_service(job_store, cache_store, clock) -> JobService:
    return JobService(
        store=job_store,
        cache=JobCache(cache_store),
        invalidate_search_on_create=False,
        clock=clock,
    )


@pytest.fixture
def client(job_service) -> TestClient:
    """Test client wired to the in-memory store and cache (no lifespan)."""
    app = create_app(lifespan=None)
    app.state.job_handler = JobHandler(job_service=job_service)
    return TestClient(app)
