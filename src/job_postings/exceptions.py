"""Exception hierarchy for the job postings service.

Services raise these; handlers translate them to HTTP status codes.
"""


class JobPostingError(Exception):
    """Base class for all job postings errors."""


class JobValidationError(JobPostingError):
    """Raised for malformed input (bad id, empty query, empty update, bad paging)."""


class JobNotFoundError(JobPostingError):
    """Raised when a job does not exist in the store."""

    def __init__(self, job_id: int) -> None:
        super().__init__(f"Job {job_id} not found")
        self.job_id = job_id


class JobStoreError(JobPostingError):
    """Raised when the relational store fails (connectivity, SQL errors)."""


class CacheError(JobPostingError):
    """Raised when the cache backend fails or holds an undecodable value.

    JobService never lets this escape: it is always downgraded to a miss.
    """
