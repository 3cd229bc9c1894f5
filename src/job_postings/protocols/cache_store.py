"""Cache storage protocol.

Defines the interface for a key-value cache backend with per-key
expiration and pattern-based bulk deletion.

Implementations can include:
- Redis (default)
- Valkey / KeyDB
- An in-memory dictionary (tests)
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for cache storage backends.

    Values are opaque bytes; callers own (de)serialization. Expiration is
    enforced by the backend: an expired key behaves exactly like a missing
    one. Backend failures must be raised as CacheError.

    Example:
        ```python
        from job_postings.protocols import CacheStore

        cache: CacheStore = RedisCacheStore.create()
        cache: CacheStore = InMemoryCacheStore()
        ```
    """

    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store a value under key.

        Args:
            key: The cache key
            value: Serialized value
            ttl: Time-to-live in seconds
        """
        ...

    def get(self, key: str) -> bytes | None:
        """Fetch a value.

        Args:
            key: The cache key

        Returns:
            The stored bytes, or None on a miss (absent or expired)
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete a single key.

        Args:
            key: The cache key

        Returns:
            True if a key was removed, False otherwise
        """
        ...

    def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob-style pattern (e.g. "jobs:list:*").

        Args:
            pattern: Glob pattern

        Returns:
            Number of keys deleted
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if healthy, False otherwise
        """
        ...
