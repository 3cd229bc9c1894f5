"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import CreateJobRequest, UpdateJobRequest
from .responses import HealthCheckResponse, JobListResponse, JobResponse

__all__ = [
    "CreateJobRequest",
    "UpdateJobRequest",
    "JobResponse",
    "JobListResponse",
    "HealthCheckResponse",
]
