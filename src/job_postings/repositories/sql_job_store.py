"""SQLAlchemy implementation of JobStore.

The relational database is the source of truth for jobs. Works with any
SQLAlchemy backend (SQLite by default, MySQL/PostgreSQL in production).
"""

import logging

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, Text, delete, func, or_, select, text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from job_postings.config import get_engine
from job_postings.entities import JobEntity, JobUpdateEntity, NewJobEntity
from job_postings.exceptions import JobNotFoundError, JobStoreError

logger = logging.getLogger(__name__)

Base = declarative_base()


class JobRecord(Base):
    """Job posting row."""

    __tablename__ = "jobs"
    # Never reuse ids, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    company = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False)
    status = Column(Boolean, nullable=False, default=True)
    created_at = Column(BigInteger, nullable=False, index=True)


# Columns matched by search
SEARCH_COLUMNS = (
    JobRecord.title,
    JobRecord.description,
    JobRecord.company,
    JobRecord.city,
    JobRecord.state,
)

# Newest first; id breaks ties between jobs created in the same second
NEWEST_FIRST = (JobRecord.created_at.desc(), JobRecord.id.desc())

# DBAPI drivers raise OverflowError for integers outside the column range
STORE_ERRORS = (SQLAlchemyError, OverflowError)


def init_database(engine: Engine) -> None:
    """
    Create the jobs table if it does not exist.

    Args:
        engine: SQLAlchemy engine
    """
    Base.metadata.create_all(engine)


def _to_entity(record: JobRecord) -> JobEntity:
    return JobEntity(
        id=record.id,
        title=record.title,
        description=record.description,
        company=record.company,
        city=record.city,
        state=record.state,
        status=bool(record.status),
        created_at=int(record.created_at),
    )


def _like_pattern(query: str) -> str:
    """Build a LIKE pattern that matches query literally as a substring."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlJobStore:
    """SQLAlchemy implementation of the JobStore protocol.

    This class satisfies the JobStore protocol through structural
    typing - no explicit inheritance needed.

    Each call runs in its own session; SQLAlchemy and driver overflow
    errors are raised as JobStoreError. Search is case-insensitive (ILIKE).
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the store.

        Args:
            engine: SQLAlchemy engine. If None, creates one from settings.
        """
        self._engine = engine or get_engine()
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @classmethod
    def create(cls, engine: Engine | None = None) -> "SqlJobStore":
        """Factory method to create SqlJobStore with defaults.

        Args:
            engine: SQLAlchemy engine. If None, uses settings.database_url.

        Returns:
            Configured SqlJobStore
        """
        return cls(engine=engine)

    def create_job(self, new_job: NewJobEntity, created_at: int) -> JobEntity:
        """Insert a job; the database assigns the id.

        Args:
            new_job: Fields of the new job
            created_at: Creation Unix timestamp

        Returns:
            The stored job
        """
        record = JobRecord(
            title=new_job.title,
            description=new_job.description,
            company=new_job.company,
            city=new_job.city,
            state=new_job.state,
            status=new_job.status,
            created_at=created_at,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(record)
                session.flush()
                return _to_entity(record)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to create job: {e}") from e

    def get_by_id(self, job_id: int) -> JobEntity:
        """Fetch one job by id.

        Raises:
            JobNotFoundError: If the job does not exist
        """
        try:
            with self._session_factory() as session:
                record = session.get(JobRecord, job_id)
                if record is None:
                    raise JobNotFoundError(job_id)
                return _to_entity(record)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to get job {job_id}: {e}") from e

    def list_jobs(self, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """Return one page of jobs, newest first, and the total job count."""
        try:
            with self._session_factory() as session:
                total = session.execute(select(func.count()).select_from(JobRecord)).scalar_one()
                rows = (
                    session.execute(select(JobRecord).order_by(*NEWEST_FIRST).offset(offset).limit(limit))
                    .scalars()
                    .all()
                )
                return [_to_entity(row) for row in rows], int(total)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to list jobs: {e}") from e

    def search_jobs(self, query: str, offset: int, limit: int) -> tuple[list[JobEntity], int]:
        """Return one page of matching jobs, newest first, and the match count.

        A job matches when ANY searchable column contains query,
        ignoring case. LIKE wildcards in query match literally.
        """
        pattern = _like_pattern(query)
        condition = or_(*(column.ilike(pattern, escape="\\") for column in SEARCH_COLUMNS))
        try:
            with self._session_factory() as session:
                total = session.execute(
                    select(func.count()).select_from(JobRecord).where(condition)
                ).scalar_one()
                rows = (
                    session.execute(
                        select(JobRecord).where(condition).order_by(*NEWEST_FIRST).offset(offset).limit(limit)
                    )
                    .scalars()
                    .all()
                )
                return [_to_entity(row) for row in rows], int(total)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to search jobs: {e}") from e

    def update(self, job_id: int, changes: JobUpdateEntity) -> None:
        """Write the provided fields to a job; other columns are untouched.

        Raises:
            JobNotFoundError: If the job does not exist
        """
        values = changes.changes()
        if not values:
            self.get_by_id(job_id)
            return

        try:
            with self._session_factory.begin() as session:
                result = session.execute(update(JobRecord).where(JobRecord.id == job_id).values(**values))
                if result.rowcount == 0:
                    raise JobNotFoundError(job_id)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to update job {job_id}: {e}") from e

    def delete(self, job_id: int) -> None:
        """Delete a job. Deleting a missing id is a no-op."""
        try:
            with self._session_factory.begin() as session:
                result = session.execute(delete(JobRecord).where(JobRecord.id == job_id))
                if result.rowcount == 0:
                    logger.debug("Delete of missing job %d ignored", job_id)
        except STORE_ERRORS as e:
            raise JobStoreError(f"Failed to delete job {job_id}: {e}") from e

    def health_check(self) -> bool:
        """Check if the database is reachable.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False
