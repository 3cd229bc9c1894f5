"""Job domain entities."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class NewJobEntity:
    """A job that has not been persisted yet (no id, no created_at)."""

    title: str
    description: str
    company: str
    city: str
    state: str
    status: bool = True


@dataclass(frozen=True)
class JobEntity:
    """Domain entity for a stored job posting.

    Attributes:
        id: Store-assigned identifier, never reused
        title: Job title
        description: Free-text description
        company: Hiring company
        city: City of the position
        state: State/region of the position
        status: True while the posting is active
        created_at: Unix timestamp (seconds) of creation, immutable
    """

    id: int
    title: str
    description: str
    company: str
    city: str
    state: str
    status: bool
    created_at: int


@dataclass(frozen=True)
class JobUpdateEntity:
    """Partial update for a job. None means "leave the column untouched"."""

    title: str | None = None
    description: str | None = None
    company: str | None = None
    city: str | None = None
    state: str | None = None
    status: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the provided fields, keyed by column name."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.changes()
