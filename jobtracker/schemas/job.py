"""Job schemas.

Request bodies accept both the camelCase keys used by the web client and the
snake_case attribute names; responses are serialized in camelCase.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from jobtracker.db import JOB_STATUSES, JOB_TYPES

JobStatus = Literal[JOB_STATUSES]
JobType = Literal[JOB_TYPES]


class JobCreate(BaseModel):
    """Job creation schema."""

    company: str = Field(..., min_length=1, max_length=50)
    position: str = Field(..., min_length=1, max_length=100)
    status: JobStatus = "pending"
    job_type: JobType = Field(
        default="full-time", validation_alias=AliasChoices("jobType", "job_type")
    )
    job_location: str = Field(
        default="my city",
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("jobLocation", "job_location"),
    )

    @field_validator("company", "position")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()


class JobUpdate(BaseModel):
    """Partial update; only fields present in the body are applied.

    ``company`` and ``position`` are left unconstrained here so that the
    service layer can reject blank values with its own error.
    """

    company: Optional[str] = Field(default=None, max_length=50)
    position: Optional[str] = Field(default=None, max_length=100)
    status: Optional[JobStatus] = None
    job_type: Optional[JobType] = Field(
        default=None, validation_alias=AliasChoices("jobType", "job_type")
    )
    job_location: Optional[str] = Field(
        default=None,
        max_length=100,
        validation_alias=AliasChoices("jobLocation", "job_location"),
    )


class JobResponse(BaseModel):
    """Job response schema."""

    id: int
    company: str
    position: str
    status: str
    job_type: str = Field(alias="jobType")
    job_location: str = Field(alias="jobLocation")
    owner_id: int = Field(alias="createdBy")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total_jobs: int = Field(alias="totalJobs")
    num_of_pages: int = Field(alias="numOfPages")

    model_config = {"populate_by_name": True}


class StatusCounts(BaseModel):
    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplicationsResponse(BaseModel):
    date: str
    count: int

    model_config = {"from_attributes": True}


class JobStatsResponse(BaseModel):
    """Status histogram plus the oldest-first monthly series."""

    default_stats: StatusCounts = Field(alias="defaultStats")
    monthly_applications: list[MonthlyApplicationsResponse] = Field(
        alias="monthlyApplications"
    )

    model_config = {"populate_by_name": True}
