"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from job_postings.config import get_engine, get_redis_client
from job_postings.handlers import JobHandler
from job_postings.repositories import RedisCacheStore, SqlJobStore, init_database
from job_postings.services import JobService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> JobHandler:
    """Dependency injection for JobHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The JobHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "job_handler", None)
    if handler is None:
        raise RuntimeError("JobHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (data access) - SQL store and Redis cache
    2. Service (business logic) - owned by the handler
    3. Handler (HTTP endpoints) - stored in app.state.job_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Cleanup:
        Closes the Redis client, disposes the engine and removes all
        services from app.state on shutdown
    """
    engine = get_engine()
    init_database(engine)
    store = SqlJobStore.create(engine=engine)

    redis_client = get_redis_client()
    cache_store = RedisCacheStore.create(redis_client=redis_client)

    job_service = JobService.create(store=store, cache_store=cache_store)
    job_handler = JobHandler(job_service=job_service)

    # Store in app.state (FastAPI pattern)
    app.state.job_handler = job_handler

    health = job_service.is_healthy()
    logger.info("Job service initialized (database=%s)", engine.url.render_as_string(hide_password=True))
    logger.info("Database healthy: %s, cache healthy: %s", health["database"], health["cache"])
    if not health["cache"]:
        logger.warning("Redis unreachable at startup; serving from the database only")

    yield

    # Cleanup - remove from app.state
    del app.state.job_handler
    redis_client.close()
    engine.dispose()
    logger.info("Job service shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[JobHandler, Depends(get_handler)]