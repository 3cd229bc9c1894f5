"""Repository layer for data access.

This layer abstracts external dependencies (Redis, relational databases)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (Redis -> another cache, SQLite -> MySQL, etc.)
- Unit testing with in-memory implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from job_postings.protocols import CacheStore, JobStore

from .redis_cache_store import RedisCacheStore
from .sql_job_store import Base, JobRecord, SqlJobStore, init_database

__all__ = [
    "CacheStore",
    "JobStore",
    "RedisCacheStore",
    "SqlJobStore",
    "JobRecord",
    "Base",
    "init_database",
]
