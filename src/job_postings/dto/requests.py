"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreateJobRequest(BaseModel):
    """Request DTO for creating a job.

    The handler will convert this to a NewJobEntity for the service layer.
    """

    title: str = Field(..., description="Job title", min_length=1)
    description: str = Field(..., description="Job description", min_length=1)
    company: str = Field(..., description="Hiring company", min_length=1)
    city: str = Field(..., description="City of the position", min_length=1)
    state: str = Field(..., description="State or region of the position", min_length=1)


class UpdateJobRequest(BaseModel):
    """Request DTO for a partial job update.

    Omitted (or null) fields are left unchanged. At least one field is required.
    """

    title: str | None = Field(None, description="New job title", min_length=1)
    description: str | None = Field(None, description="New job description", min_length=1)
    company: str | None = Field(None, description="New hiring company", min_length=1)
    city: str | None = Field(None, description="New city", min_length=1)
    state: str | None = Field(None, description="New state or region", min_length=1)
    status: bool | None = Field(None, description="Whether the posting is active")
