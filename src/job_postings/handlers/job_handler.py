"""HTTP handlers for job operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, parameter normalization,
and error handling.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from job_postings.config import settings
from job_postings.dto import (
    CreateJobRequest,
    HealthCheckResponse,
    JobListResponse,
    JobResponse,
    UpdateJobRequest,
)
from job_postings.entities import JobEntity, JobUpdateEntity, NewJobEntity
from job_postings.exceptions import JobNotFoundError, JobValidationError
from job_postings.services import JobService

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Largest value a signed 64-bit INTEGER column or OFFSET accepts
MAX_INT = 2**63 - 1


def _parse_int(raw: str | int | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    if abs(value) > MAX_INT:
        return default
    return value


def normalize_pagination(
    page: str | int | None,
    limit: str | int | None,
    max_limit: int | None = None,
) -> tuple[int, int, int]:
    """Normalize raw page/limit query parameters.

    Missing, non-numeric or out-of-range values fall back to page=1,
    limit=10; page < 1 becomes 1 and limit < 1 becomes 10. page is capped
    so that the offset fits a 64-bit integer.

    Args:
        page: Raw 1-based page number
        limit: Raw page size
        max_limit: Upper bound for limit. Defaults to settings.max_page_size.

    Returns:
        Tuple of (page, limit, offset) with offset = (page - 1) * limit
    """
    max_limit = max_limit or settings.max_page_size

    page_num = _parse_int(page, DEFAULT_PAGE)
    limit_num = _parse_int(limit, DEFAULT_LIMIT)
    if page_num < 1:
        page_num = DEFAULT_PAGE
    if limit_num < 1:
        limit_num = DEFAULT_LIMIT
    limit_num = min(limit_num, max_limit)
    # Keep the offset within MAX_INT
    page_num = min(page_num, MAX_INT // limit_num + 1)

    return page_num, limit_num, (page_num - 1) * limit_num


def parse_job_id(raw: str | int) -> int:
    """Parse a job id path parameter.

    Raises:
        HTTPException: 400 if the id is not a positive 64-bit integer
    """
    try:
        job_id = int(raw)
    except (TypeError, ValueError):
        job_id = 0
    if job_id < 1 or job_id > MAX_INT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid job id")
    return job_id


def to_response(job: JobEntity) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        company=job.company,
        city=job.city,
        state=job.state,
        created_at=job.created_at,
        status=job.status,
    )


@contextmanager
def _http_errors(failure: str) -> Iterator[None]:
    """Translate service exceptions into HTTPException.

    JobValidationError -> 400, JobNotFoundError -> 404, anything else -> 500.
    """
    try:
        yield
    except HTTPException:
        raise
    except JobValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except JobNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found") from e
    except Exception as e:
        logger.exception("%s", failure)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=failure,
        ) from e


class JobHandler:
    """HTTP handlers for job operations.

    This handler delegates business logic to JobService
    and handles HTTP-specific concerns like:
    - Normalizing pagination parameters and path ids
    - Converting entities to DTOs
    - Setting appropriate status codes

    Example:
        ```python
        handler = JobHandler(job_service=job_service)

        # Use in FastAPI route
        @app.get("/jobs", response_model=JobListResponse)
        def list_jobs(page: str | None = None, limit: str | None = None):
            return handler.list_jobs(page, limit)
        ```
    """

    def __init__(self, job_service: JobService) -> None:
        """Initialize the job handler.

        Args:
            job_service: The job service for business logic (required).
        """
        self._jobs = job_service

    def create_job(self, request: CreateJobRequest) -> JobResponse:
        """Handle POST /jobs requests.

        Args:
            request: The create job request DTO

        Returns:
            JobResponse for the new job (status=True, created_at=now)
        """
        with _http_errors("Failed to create job"):
            job = self._jobs.create_job(
                NewJobEntity(
                    title=request.title,
                    description=request.description,
                    company=request.company,
                    city=request.city,
                    state=request.state,
                )
            )
        return to_response(job)

    def list_jobs(self, page: str | int | None = None, limit: str | int | None = None) -> JobListResponse:
        """Handle GET /jobs requests.

        Args:
            page: Raw page query parameter
            limit: Raw limit query parameter

        Returns:
            JobListResponse with jobs, total, page and limit
        """
        page_num, limit_num, offset = normalize_pagination(page, limit)
        with _http_errors("Failed to list jobs"):
            jobs, total = self._jobs.list_jobs(offset, limit_num)
        return JobListResponse(
            jobs=[to_response(job) for job in jobs],
            total=total,
            page=page_num,
            limit=limit_num,
        )

    def search_jobs(
        self,
        query: str | None,
        page: str | int | None = None,
        limit: str | int | None = None,
    ) -> JobListResponse:
        """Handle GET /jobs/search requests.

        Args:
            query: The q query parameter (required, non-empty)
            page: Raw page query parameter
            limit: Raw limit query parameter

        Returns:
            JobListResponse with matching jobs, total, page and limit
        """
        if not query:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing search query")

        page_num, limit_num, offset = normalize_pagination(page, limit)
        with _http_errors("Failed to search jobs"):
            jobs, total = self._jobs.search_jobs(query, offset, limit_num)
        return JobListResponse(
            jobs=[to_response(job) for job in jobs],
            total=total,
            page=page_num,
            limit=limit_num,
        )

    def get_job(self, raw_id: str | int) -> JobResponse:
        """Handle GET /jobs/{id} requests."""
        job_id = parse_job_id(raw_id)
        with _http_errors("Failed to get job"):
            job = self._jobs.get_job(job_id)
        return to_response(job)

    def update_job(self, raw_id: str | int, request: UpdateJobRequest) -> JobResponse:
        """Handle PUT /jobs/{id} requests.

        Checks the job exists, applies the provided fields, then re-reads
        the job so the response reflects the stored state.

        Returns:
            JobResponse for the updated job
        """
        job_id = parse_job_id(raw_id)
        changes = JobUpdateEntity(**request.model_dump(exclude_none=True))
        if changes.is_empty():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")

        with _http_errors("Failed to update job"):
            self._jobs.get_job(job_id)
            self._jobs.update_job(job_id, changes)
            job = self._jobs.get_job(job_id)
        return to_response(job)

    def delete_job(self, raw_id: str | int) -> None:
        """Handle DELETE /jobs/{id} requests. Deleting a missing job succeeds."""
        job_id = parse_job_id(raw_id)
        with _http_errors("Failed to delete job"):
            self._jobs.delete_job(job_id)

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse; status is "unhealthy" only when the database is down,
            since the service keeps working without the cache
        """
        health = self._jobs.is_healthy()
        return HealthCheckResponse(
            status="healthy" if health["database"] else "unhealthy",
            database_healthy=health["database"],
            cache_healthy=health["cache"],
        )
