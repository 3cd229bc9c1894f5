"""Redis implementation of CacheStore.

Plain string keys with SET ... EX for expiration, and SCAN-based
pattern deletion. It's the default implementation and satisfies the
CacheStore protocol.
"""

import logging

import redis

from job_postings.config import get_redis_client
from job_postings.exceptions import CacheError

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Redis implementation of the CacheStore protocol.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Every redis.RedisError (connection refused, timeout, ...) is raised as
    CacheError so callers can treat an unavailable cache as a miss.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        scan_count: int = 500,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            redis_client: Redis client instance. If None, creates default.
            scan_count: SCAN batch size hint used by delete_pattern.
        """
        self._client = redis_client or get_redis_client()
        self._scan_count = scan_count

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            redis_client: Redis client. If None, builds one from settings.

        Returns:
            Configured RedisCacheStore
        """
        return cls(redis_client=redis_client)

    def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store a value with an expiration.

        Args:
            key: The cache key
            value: Serialized value
            ttl: Time-to-live in seconds
        """
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"Failed to set {key}: {e}") from e

    def get(self, key: str) -> bytes | None:
        """Fetch a value.

        Args:
            key: The cache key

        Returns:
            Stored bytes, or None if the key is absent or expired
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheError(f"Failed to get {key}: {e}") from e
        if value is None:
            return None
        if isinstance(value, str):
            return value.encode()
        return value  # type: ignore[return-value]

    def delete(self, key: str) -> bool:
        """Delete a specific key.

        Args:
            key: The cache key

        Returns:
            True if deleted, False otherwise
        """
        try:
            result: int = self._client.delete(key)  # type: ignore[assignment]
        except redis.RedisError as e:
            raise CacheError(f"Failed to delete {key}: {e}") from e
        return result > 0

    def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching a glob pattern.

        Keys are collected with SCAN (never KEYS) and removed in
        pipelined batches.

        Args:
            pattern: Glob pattern, e.g. "jobs:list:*"

        Returns:
            Number of keys deleted
        """
        count = 0
        batch: list = []
        try:
            for key in self._client.scan_iter(match=pattern, count=self._scan_count):
                batch.append(key)
                if len(batch) >= self._scan_count:
                    count += self._delete_batch(batch)
                    batch = []
            if batch:
                count += self._delete_batch(batch)
        except redis.RedisError as e:
            raise CacheError(f"Failed to delete pattern {pattern}: {e}") from e

        logger.debug("Deleted %d keys matching %s", count, pattern)
        return count

    def _delete_batch(self, keys: list) -> int:
        pipe = self._client.pipeline()
        for key in keys:
            pipe.delete(key)
        return sum(pipe.execute())

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            result = self._client.ping()
            return bool(result)
        except redis.RedisError:
            return False
