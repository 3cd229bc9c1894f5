"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from job_postings.services import JobService

    # Using factory method (recommended)
    service = JobService.create(store=store, cache_store=cache_store)

    # Or manual creation
    service = JobService(store=store, cache=JobCache(cache_store))
    ```
"""

from .job_cache import JobCache
from .job_service import JobService

__all__ = [
    "JobCache",
    "JobService",
]
