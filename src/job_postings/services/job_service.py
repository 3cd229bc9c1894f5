"""Job service for core business logic.

This service is the cache-aware job repository: it orchestrates the
relational store (source of truth) and the job cache (disposable copies).

Reads are read-through: try the cache, fall back to the store on a miss
and populate the cache. Writes go to the store first, then invalidate
every cache entry the write may have made stale.

The cache is never a correctness dependency. Any CacheError is logged
and treated as a miss, so a Redis outage degrades latency only.
"""

import logging
import time
from collections.abc import Callable

from job_postings.config import settings
from job_postings.entities import JobEntity, JobPageEntity, JobUpdateEntity, NewJobEntity
from job_postings.exceptions import CacheError, JobValidationError
from job_postings.protocols import CacheStore, JobStore

from .job_cache import JobCache

logger = logging.getLogger(__name__)


def page_number(offset: int, limit: int) -> int:
    """1-based page number used in list/search cache keys."""
    return offset // limit + 1


class JobService:
    """Core job orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - JobStore: SQLAlchemy (SQLite, MySQL, PostgreSQL), or any other store
    - CacheStore: Redis, or an in-memory fake in tests

    Invalidation rules:
    - create: job:<id> is populated, all list pages are dropped. Search
      pages are kept unless invalidate_search_on_create is set.
    - update / delete: job:<id>, all list pages and all search pages are
      dropped.

    Example:
        ```python
        from job_postings.repositories import RedisCacheStore, SqlJobStore
        from job_postings.services import JobService

        service = JobService.create(
            store=SqlJobStore.create(),
            cache_store=RedisCacheStore.create(),
        )
        job = service.create_job(NewJobEntity(title="Engineer", ...))
        jobs, total = service.list_jobs(offset=0, limit=10)
        ```
    """

    def __init__(
        self,
        store: JobStore,
        cache: JobCache,
        invalidate_search_on_create: bool | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the job service.

        Args:
            store: Authoritative job store (required).
            cache: Job cache (required).
            invalidate_search_on_create: Also drop search pages on create.
                Defaults to settings.
            clock: Source of the creation timestamp.
        """
        self._store = store
        self._cache = cache
        if invalidate_search_on_create is None:
            invalidate_search_on_create = settings.cache_invalidate_search_on_create
        self._invalidate_search_on_create = invalidate_search_on_create
        self._clock = clock

    @classmethod
    def create(
        cls,
        store: JobStore,
        cache_store: CacheStore,
        invalidate_search_on_create: bool | None = None,
    ) -> "JobService":
        """Factory method to create JobService from a raw cache backend.

        Args:
            store: Authoritative job store (required).
            cache_store: Cache backend (required).
            invalidate_search_on_create: If None, uses settings.

        Returns:
            Configured JobService instance
        """
        return cls(
            store=store,
            cache=JobCache(cache_store),
            invalidate_search_on_create=invalidate_search_on_create,
        )

    def create_job(self, new_job: NewJobEntity) -> JobEntity:
        """Create a job.

        Business logic:
        1. Stamp created_at and write to the store (assigns the id)
        2. Cache the new job
        3. Invalidate all list pages (every page and total may have shifted)

        Args:
            new_job: Fields of the job to create

        Returns:
            The created job with id and created_at set
        """
        job = self._store.create_job(new_job, created_at=int(self._clock()))
        logger.info("Created job %d", job.id)

        self._cache_call("cache job", self._cache.set_job, job)
        self._cache_call("invalidate list pages", self._cache.invalidate_lists)
        if self._invalidate_search_on_create:
            self._cache_call("invalidate search pages", self._cache.invalidate_searches)

        return job

    def get_job(self, job_id: int) -> JobEntity:
        """Fetch a job, from cache when possible.

        Args:
            job_id: Job id

        Returns:
            The job

        Raises:
            JobNotFoundError: If the job does not exist (never cached)
        """
        cached = self._cache_call("read job", self._cache.get_job, job_id)
        if cached is not None:
            logger.debug("Cache hit for job %d", job_id)
            return cached

        logger.debug("Cache miss for job %d", job_id)
        job = self._store.get_by_id(job_id)
        self._cache_call("cache job", self._cache.set_job, job)
        return job

    def list_jobs(self, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """List jobs newest first.

        Args:
            offset: Zero-based row offset
            limit: Page size

        Returns:
            Tuple of (jobs on this page, total number of jobs)
        """
        self._check_paging(offset, limit)
        page = page_number(offset, limit)

        cached = self._cache_call("read list page", self._cache.get_list, page, limit)
        if cached is not None:
            logger.debug("Cache hit for list page %d (limit %d)", page, limit)
            return cached.items, cached.total

        jobs, total = self._store.list_jobs(offset, limit)
        self._cache_call(
            "cache list page", self._cache.set_list, page, limit, JobPageEntity(items=jobs, total=total)
        )
        return jobs, total

    def search_jobs(self, query: str, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """Search jobs by substring, newest first.

        Args:
            query: Substring matched against title, description, company, city and state
            offset: Zero-based row offset
            limit: Page size

        Returns:
            Tuple of (matching jobs on this page, total number of matches)

        Raises:
            JobValidationError: If query is empty
        """
        if not query:
            raise JobValidationError("Search query must not be empty")
        self._check_paging(offset, limit)
        page = page_number(offset, limit)

        cached = self._cache_call("read search page", self._cache.get_search, query, page, limit)
        if cached is not None:
            logger.debug("Cache hit for search %r page %d (limit %d)", query, page, limit)
            return cached.items, cached.total

        jobs, total = self._store.search_jobs(query, offset, limit)
        self._cache_call(
            "cache search page",
            self._cache.set_search,
            query,
            page,
            limit,
            JobPageEntity(items=jobs, total=total),
        )
        return jobs, total

    def update_job(self, job_id: int, changes: JobUpdateEntity) -> None:
        """Apply a partial update.

        Any field may appear on any cached page, so every list and search
        page is dropped along with the job itself. Callers re-fetch the job
        to return a fresh representation.

        Args:
            job_id: Job id
            changes: Fields to change; None fields are left untouched

        Raises:
            JobValidationError: If no field is provided
            JobNotFoundError: If the job does not exist
        """
        if changes.is_empty():
            raise JobValidationError("No fields to update")

        self._store.update(job_id, changes)
        logger.info("Updated job %d (%s)", job_id, ", ".join(changes.changes()))
        self._invalidate_all(job_id)

    def delete_job(self, job_id: int) -> None:
        """Delete a job and drop every cache entry that may contain it.

        Args:
            job_id: Job id
        """
        self._store.delete(job_id)
        logger.info("Deleted job %d", job_id)
        self._invalidate_all(job_id)

    def is_healthy(self) -> dict[str, bool]:
        """Check store and cache health.

        Returns:
            Dict with "database" and "cache" flags
        """
        return {
            "database": self._store.health_check(),
            "cache": bool(self._cache_call("health check", self._cache.is_healthy)),
        }

    def _invalidate_all(self, job_id: int) -> None:
        self._cache_call("invalidate job", self._cache.invalidate_job, job_id)
        self._cache_call("invalidate list pages", self._cache.invalidate_lists)
        self._cache_call("invalidate search pages", self._cache.invalidate_searches)

    def _cache_call(self, action: str, func, *args):
        """Run a cache operation, downgrading CacheError to None."""
        try:
            return func(*args)
        except CacheError as e:
            logger.warning("Cache unavailable, could not %s: %s", action, e)
            return None

    @staticmethod
    def _check_paging(offset: int, limit: int) -> None:
        if limit < 1:
            raise JobValidationError(f"limit must be at least 1, got {limit}")
        if offset < 0:
            raise JobValidationError(f"offset must not be negative, got {offset}")

    @property
    def store(self) -> JobStore:
        """Get the underlying job store (for testing)."""
        return self._store
