"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> Memcached, MySQL -> PostgreSQL, etc.)
- Unit testing with in-memory implementations
- Clear separation of concerns

Usage:
    ```python
    from job_postings.protocols import CacheStore, JobStore

    # Type hints work with any implementation
    cache: CacheStore = RedisCacheStore.create()
    store: JobStore = SqlJobStore.create()
    ```
"""

from .cache_store import CacheStore
from .job_store import JobStore

__all__ = [
    "CacheStore",
    "JobStore",
]
