"""Job API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from jobtracker.core.config import settings
from jobtracker.dependencies import get_job_service, get_owner_context
from jobtracker.domain.context import OwnerContext
from jobtracker.domain.jobs import JobQuery
from jobtracker.schemas.job import (
    JobCreate,
    JobEnvelope,
    JobListResponse,
    JobResponse,
    JobStatsResponse,
    JobUpdate,
    MonthlyApplicationsResponse,
    StatusCounts,
)
from jobtracker.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: Optional[str] = Query(None),
    job_status: Optional[str] = Query(None, alias="status"),
    job_type: Optional[str] = Query(None, alias="jobType"),
    sort: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> JobListResponse:
    """List the caller's jobs.

    Every parameter is optional and taken as a raw string; values that cannot
    be used fall back to defaults instead of failing the request.
    """
    query = JobQuery.from_params(
        search=search,
        status=job_status,
        job_type=job_type,
        sort=sort,
        page=page,
        limit=limit,
        default_limit=settings.default_page_size,
    )
    result = service.list_jobs(query, context)
    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in result.jobs],
        total_jobs=result.total_count,
        num_of_pages=result.page_count,
    )


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> JobEnvelope:
    job = service.create_job(payload, context)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.get("/stats", response_model=JobStatsResponse)
def show_stats(
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> JobStatsResponse:
    """Status histogram and monthly application counts for the caller."""
    stats = service.get_stats(context)
    return JobStatsResponse(
        default_stats=StatusCounts(**stats.status_counts),
        monthly_applications=[
            MonthlyApplicationsResponse.model_validate(item) for item in stats.monthly_applications
        ],
    )


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: int,
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> JobEnvelope:
    job = service.get_job(job_id, context)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    patch: JobUpdate,
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> JobEnvelope:
    job = service.update_job(job_id, patch, context)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    service: JobService = Depends(get_job_service),
    context: OwnerContext = Depends(get_owner_context),
) -> Response:
    service.delete_job(job_id, context)
    return Response(status_code=status.HTTP_200_OK)
