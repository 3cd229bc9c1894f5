"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .job import JobEntity, JobUpdateEntity, NewJobEntity
from .job_page import JobPageEntity

__all__ = ["JobEntity", "NewJobEntity", "JobUpdateEntity", "JobPageEntity"]
