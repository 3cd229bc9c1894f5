"""Job store protocol.

Defines the interface for the authoritative, persistent storage of jobs.
"""

from typing import Protocol, runtime_checkable

from job_postings.entities import JobEntity, JobUpdateEntity, NewJobEntity


@runtime_checkable
class JobStore(Protocol):
    """Protocol for the relational job store.

    Failures are raised as JobStoreError; a missing job as JobNotFoundError.
    Listing and search order by created_at descending, newest id first on ties.
    """

    def create_job(self, new_job: NewJobEntity, created_at: int) -> JobEntity:
        """Insert a job and return it with its assigned id."""
        ...

    def get_by_id(self, job_id: int) -> JobEntity:
        """Fetch one job.

        Raises:
            JobNotFoundError: If no job has this id
        """
        ...

    def list_jobs(self, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """Return one page of jobs and the total number of jobs."""
        ...

    def search_jobs(self, query: str, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """Return one page of jobs containing query and the total number of matches.

        A job matches when any of title, description, company, city or
        state contains the query.
        """
        ...

    def update(self, job_id: int, changes: JobUpdateEntity) -> None:
        """Write the provided fields of changes to the job.

        Raises:
            JobNotFoundError: If no job has this id
        """
        ...

    def delete(self, job_id: int) -> None:
        """Delete a job. Deleting a missing id is a no-op."""
        ...

    def health_check(self) -> bool:
        """Check if the store is reachable."""
        ...
