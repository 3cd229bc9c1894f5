import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./jobs.db")
    database_pool_timeout: float = float(os.getenv("DATABASE_POOL_TIMEOUT", "5"))
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "0.5"))

    # Cache
    # Off by default: a new job may be missing from cached search pages until they expire
    cache_invalidate_search_on_create: bool = (
        os.getenv("CACHE_INVALIDATE_SEARCH_ON_CREATE", "false").lower() == "true"
    )

    # Pagination
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "100"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8080"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite.

        Returns:
            True for sqlite:// URLs, False otherwise
        """
        return self.database_url.startswith("sqlite")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.redis_socket_timeout <= 0:
            raise ValueError("REDIS_SOCKET_TIMEOUT must be positive")

        if self.database_pool_timeout <= 0:
            raise ValueError("DATABASE_POOL_TIMEOUT must be positive")

        if self.max_page_size < 1:
            raise ValueError(f"MAX_PAGE_SIZE must be at least 1, got {self.max_page_size}")

        if self.log_level.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
        decode_responses=False,
    )


def get_engine() -> Engine:
    """Create a SQLAlchemy engine for the configured database."""
    if settings.is_sqlite:
        # SQLite connections are used from FastAPI's thread pool
        return create_engine(
            settings.database_url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_timeout=settings.database_pool_timeout,
    )
