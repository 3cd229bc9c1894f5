"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .job_handler import JobHandler, normalize_pagination, parse_job_id

__all__ = [
    "JobHandler",
    "normalize_pagination",
    "parse_job_id",
]
