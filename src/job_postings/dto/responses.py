"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class JobResponse(BaseModel):
    """Single job representation."""

    id: int = Field(..., description="Job identifier", ge=1)
    title: str = Field(..., description="Job title")
    description: str = Field(..., description="Job description")
    company: str = Field(..., description="Hiring company")
    city: str = Field(..., description="City of the position")
    state: str = Field(..., description="State or region of the position")
    created_at: int = Field(..., description="Creation time (Unix timestamp, seconds)")
    status: bool = Field(..., description="Whether the posting is active")


class JobListResponse(BaseModel):
    """Response DTO for list and search operations."""

    jobs: list[JobResponse] = Field(
        default_factory=list,
        description="Jobs on this page (newest first)",
    )
    total: int = Field(..., description="Total number of matching jobs", ge=0)
    page: int = Field(..., description="1-based page number", ge=1)
    limit: int = Field(..., description="Page size", ge=1)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    database_healthy: bool = Field(..., description="Whether the database is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
