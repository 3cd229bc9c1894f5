"""Job Postings - CRUD and search for job postings, cached in Redis.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (JobStore, CacheStore)
    - repositories: Data access implementations (SQLAlchemy, Redis)
    - services: Business logic (cache-aware JobService, JobCache)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from job_postings.repositories import RedisCacheStore, SqlJobStore
    from job_postings.services import JobService

    service = JobService.create(
        store=SqlJobStore.create(),
        cache_store=RedisCacheStore.create(),
    )
    ```

For HTTP API:
    ```python
    from job_postings.api.app import app
    ```
"""

__version__ = "0.1.0"

from job_postings.config import get_engine, get_redis_client, settings  # noqa: E402
from job_postings.dto import CreateJobRequest, UpdateJobRequest  # noqa: E402
from job_postings.entities import JobEntity, JobPageEntity, JobUpdateEntity, NewJobEntity  # noqa: E402
from job_postings.exceptions import (  # noqa: E402
    CacheError,
    JobNotFoundError,
    JobPostingError,
    JobStoreError,
    JobValidationError,
)
from job_postings.handlers import JobHandler  # noqa: E402
from job_postings.protocols import CacheStore, JobStore  # noqa: E402
from job_postings.repositories import RedisCacheStore, SqlJobStore  # noqa: E402
from job_postings.services import JobCache, JobService  # noqa: E402

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    "get_engine",
    # Protocols (interfaces)
    "JobStore",
    "CacheStore",
    # Services (business logic)
    "JobService",
    "JobCache",
    # Handlers (HTTP)
    "JobHandler",
    # Repositories (data access)
    "SqlJobStore",
    "RedisCacheStore",
    # Entities (domain models)
    "JobEntity",
    "NewJobEntity",
    "JobUpdateEntity",
    "JobPageEntity",
    # DTOs (API contracts)
    "CreateJobRequest",
    "UpdateJobRequest",
    # Errors
    "JobPostingError",
    "JobValidationError",
    "JobNotFoundError",
    "JobStoreError",
    "CacheError",
]
