"""
In-memory fakes and builders shared by the tests.
"""

import fnmatch

from job_postings.entities import NewJobEntity
from job_postings.exceptions import CacheError


class FakeClock:
    """Manually advanced clock returning Unix seconds."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryCacheStore:
    """Dictionary-backed CacheStore with TTL bookkeeping.

    Setting ``available = False`` makes every call raise CacheError,
    like an unreachable Redis.
    """

    def __init__(self, clock: FakeClock | None = None) -> None:
        self._clock = clock or FakeClock()
        self._data: dict[str, tuple[bytes, float]] = {}
        self.ttls: dict[str, int] = {}
        self.available = True

    def _check(self) -> None:
        if not self.available:
            raise CacheError("cache unavailable")

    def set(self, key: str, value: bytes, ttl: int) -> None:
        self._check()
        self._data[key] = (value, self._clock() + ttl)
        self.ttls[key] = ttl

    def get(self, key: str) -> bytes | None:
        self._check()
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._data[key]
            return None
        return value

    def delete(self, key: str) -> bool:
        self._check()
        return self._data.pop(key, None) is not None

    def delete_pattern(self, pattern: str) -> int:
        self._check()
        keys = [key for key in self._data if fnmatch.fnmatchcase(key, pattern)]
        for key in keys:
            del self._data[key]
        return len(keys)

    def health_check(self) -> bool:
        return self.available

    def keys(self) -> list[str]:
        """Live (unexpired) keys."""
        return [key for key, (_, expires_at) in self._data.items() if self._clock() < expires_at]

    def put_raw(self, key: str, value: bytes, ttl: int = 60) -> None:
        self._data[key] = (value, self._clock() + ttl)


def make_job(**overrides) -> NewJobEntity:
    """Build a NewJobEntity with sensible defaults."""
    fields = {
        "title": "Backend Engineer",
        "description": "Build and ship backend services",
        "company": "Acme Corp",
        "city": "Austin",
        "state": "TX",
    }
    fields.update(overrides)
    return NewJobEntity(**fields)
