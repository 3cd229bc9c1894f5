"""Typed job cache on top of a CacheStore.

Owns the cache key scheme, the TTL of each entry family and the JSON
encoding of cached values. Key names are part of the external contract:
other processes sharing the same Redis read and invalidate them.

Keys:
    job:<id>                             single job, 30 minutes
    jobs:list:<page>:<limit>             list page, 15 minutes
    jobs:search:<query>:<page>:<limit>   search page, 10 minutes
"""

import json
import logging
from dataclasses import asdict

from job_postings.entities import JobEntity, JobPageEntity
from job_postings.exceptions import CacheError
from job_postings.protocols import CacheStore

logger = logging.getLogger(__name__)

JOB_TTL = 30 * 60
LIST_TTL = 15 * 60
SEARCH_TTL = 10 * 60

LIST_PATTERN = "jobs:list:*"
SEARCH_PATTERN = "jobs:search:*"


def job_key(job_id: int) -> str:
    return f"job:{job_id}"


def list_key(page: int, limit: int) -> str:
    return f"jobs:list:{page}:{limit}"


def search_key(query: str, page: int, limit: int) -> str:
    # query is embedded verbatim; page and limit never contain ":" so the
    # key still splits unambiguously from the right
    return f"jobs:search:{query}:{page}:{limit}"


def encode_job(job: JobEntity) -> bytes:
    return json.dumps(asdict(job)).encode()


def decode_job(raw: bytes) -> JobEntity:
    """Decode a cached job.

    Raises:
        CacheError: If the value is not a valid job document
    """
    try:
        return _job_from_dict(json.loads(raw))
    except (ValueError, TypeError, KeyError) as e:
        raise CacheError(f"Undecodable cached job: {e}") from e


def encode_page(page: JobPageEntity) -> bytes:
    return json.dumps({"items": [asdict(job) for job in page.items], "total": page.total}).encode()


def decode_page(raw: bytes) -> JobPageEntity:
    """Decode a cached list/search page.

    Raises:
        CacheError: If the value is not a valid page document
    """
    try:
        data = json.loads(raw)
        return JobPageEntity(
            items=[_job_from_dict(item) for item in data["items"]],
            total=int(data["total"]),
        )
    except (ValueError, TypeError, KeyError) as e:
        raise CacheError(f"Undecodable cached page: {e}") from e


def _job_from_dict(data: dict) -> JobEntity:
    if not isinstance(data["status"], bool):
        raise TypeError(f"status must be a boolean, got {data['status']!r}")
    return JobEntity(
        id=int(data["id"]),
        title=data["title"],
        description=data["description"],
        company=data["company"],
        city=data["city"],
        state=data["state"],
        status=data["status"],
        created_at=int(data["created_at"]),
    )


class JobCache:
    """Job-aware facade over a CacheStore.

    All methods raise CacheError on backend or decode failures; deciding
    what a failure means is left to the caller.

    Example:
        ```python
        cache = JobCache(RedisCacheStore.create())
        cache.set_job(job)
        cache.get_job(job.id)  # -> JobEntity | None
        cache.invalidate_lists()
        ```
    """

    def __init__(self, store: CacheStore) -> None:
        """Initialize the job cache.

        Args:
            store: Cache backend (required).
        """
        self._store = store

    def get_job(self, job_id: int) -> JobEntity | None:
        raw = self._store.get(job_key(job_id))
        return None if raw is None else decode_job(raw)

    def set_job(self, job: JobEntity) -> None:
        self._store.set(job_key(job.id), encode_job(job), JOB_TTL)

    def get_list(self, page: int, limit: int) -> JobPageEntity | None:
        raw = self._store.get(list_key(page, limit))
        return None if raw is None else decode_page(raw)

    def set_list(self, page: int, limit: int, result: JobPageEntity) -> None:
        self._store.set(list_key(page, limit), encode_page(result), LIST_TTL)

    def get_search(self, query: str, page: int, limit: int) -> JobPageEntity | None:
        raw = self._store.get(search_key(query, page, limit))
        return None if raw is None else decode_page(raw)

    def set_search(self, query: str, page: int, limit: int, result: JobPageEntity) -> None:
        self._store.set(search_key(query, page, limit), encode_page(result), SEARCH_TTL)

    def invalidate_job(self, job_id: int) -> None:
        self._store.delete(job_key(job_id))

    def invalidate_lists(self) -> int:
        """Drop every cached list page.

        Returns:
            Number of keys deleted
        """
        return self._store.delete_pattern(LIST_PATTERN)

    def invalidate_searches(self) -> int:
        """Drop every cached search page.

        Returns:
            Number of keys deleted
        """
        return self._store.delete_pattern(SEARCH_PATTERN)

    def is_healthy(self) -> bool:
        return self._store.health_check()
