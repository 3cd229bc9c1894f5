"""Job page domain entity."""

from dataclasses import dataclass, field

from .job import JobEntity


@dataclass(frozen=True)
class JobPageEntity:
    """One page of a list or search result.

    Cached as a single value so the items and the total are always
    fetched and invalidated together.

    Attributes:
        items: Jobs on this page, newest first
        total: Size of the full (filtered) result set, not the page size
    """

    items: list[JobEntity] = field(default_factory=list)
    total: int = 0
