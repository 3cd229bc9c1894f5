from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from job_postings import __version__
from job_postings.api.dependencies import HandlerDep, lifespan
from job_postings.config import settings
from job_postings.dto import (
    CreateJobRequest,
    HealthCheckResponse,
    JobListResponse,
    JobResponse,
    UpdateJobRequest,
)
from job_postings.logger import setup_logging


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body validation failures as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(lifespan=lifespan) -> FastAPI:
    """Build the FastAPI application.

    Args:
        lifespan: Lifespan context manager that wires app.state.
            Tests pass None and set app.state.job_handler themselves.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Job Postings API",
        description="Job posting service with CRUD, pagination and search, cached in Redis",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Job Postings API",
            "version": __version__,
            "description": "Job posting service with CRUD, pagination and search",
            "endpoints": {
                "jobs": "/jobs",
                "search": "/jobs/search",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
        """Health check endpoint. 503 when the database is unreachable."""
        result = handler.health_check()
        if result.status != "healthy":
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return result

    @app.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
    def create_job(request: CreateJobRequest, handler: HandlerDep) -> JobResponse:
        """Create a new job posting."""
        return handler.create_job(request)

    @app.get("/jobs", response_model=JobListResponse)
    def list_jobs(handler: HandlerDep, page: str | None = None, limit: str | None = None) -> JobListResponse:
        """List jobs, newest first, with pagination."""
        return handler.list_jobs(page, limit)

    # Registered before /jobs/{job_id} so "search" is not taken as an id
    @app.get("/jobs/search", response_model=JobListResponse)
    def search_jobs(
        handler: HandlerDep,
        q: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> JobListResponse:
        """Search jobs by title, description, company, city or state."""
        return handler.search_jobs(q, page, limit)

    @app.get("/jobs/{job_id}", response_model=JobResponse)
    def get_job(job_id: str, handler: HandlerDep) -> JobResponse:
        """Get a job by id."""
        return handler.get_job(job_id)

    @app.put("/jobs/{job_id}", response_model=JobResponse)
    def update_job(job_id: str, request: UpdateJobRequest, handler: HandlerDep) -> JobResponse:
        """Update the provided fields of a job."""
        return handler.update_job(job_id, request)

    @app.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_job(job_id: str, handler: HandlerDep) -> Response:
        """Delete a job by id."""
        handler.delete_job(job_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


setup_logging(settings.log_level)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "job_postings.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
