"""Job tracking services: owner-scoped listing, CRUD and statistics."""

from __future__ import annotations

from sqlalchemy.orm import Session

from jobtracker.core.config import settings
from jobtracker.core.logging import LoggerAdapter, get_logger
from jobtracker.core.metrics import record_job_mutation
from jobtracker.db import Job
from jobtracker.domain.context import OwnerContext
from jobtracker.domain.exceptions import BadRequestError, NotFoundError
from jobtracker.domain.jobs import (
    JobPage,
    JobQuery,
    JobStats,
    build_monthly_series,
    build_status_histogram,
)
from jobtracker.repositories import JobRepository
from jobtracker.schemas.job import JobCreate, JobUpdate

logger = get_logger(__name__)

# Fields an update may never blank out
_REQUIRED_TEXT_FIELDS = ("company", "position")


class JobService:
    """Coordinates job queries and mutations for a single owner."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.jobs = JobRepository(session)

    def _log(self, context: OwnerContext) -> LoggerAdapter:
        return LoggerAdapter(logger, {"owner_id": context.owner_id})

    # ------------------------------------------------------------------
    # Queries

    def list_jobs(self, query: JobQuery, context: OwnerContext) -> JobPage:
        """Return one page of the owner's jobs plus total/page counts."""
        filters = {"search": query.search, "status": query.status, "job_type": query.job_type}
        jobs = self.jobs.find_for_owner(
            context.owner_id,
            **filters,
            sort=query.sort,
            skip=query.skip,
            limit=query.limit,
        )
        total = self.jobs.count_for_owner(context.owner_id, **filters)
        page = JobPage.build(jobs, total, query.limit)
        self._log(context).debug(
            "Listed jobs",
            extra={"page": query.page, "limit": query.limit, "total_jobs": total},
        )
        return page

    def get_job(self, job_id: int, context: OwnerContext) -> Job:
        job = self.jobs.get_for_owner(job_id, context.owner_id)
        if not job:
            raise NotFoundError(f"No job with id {job_id}")
        return job

    def get_stats(self, context: OwnerContext) -> JobStats:
        """Status histogram and the most recent months of applications.

        The two aggregates are separate reads and may observe different
        snapshots under concurrent writes.
        """
        status_rows = self.jobs.count_by_status(context.owner_id)
        month_rows = self.jobs.count_by_month(context.owner_id, limit=settings.stats_months)
        return JobStats(
            status_counts=build_status_histogram(status_rows),
            monthly_applications=build_monthly_series(month_rows),
        )

    # ------------------------------------------------------------------
    # Mutations

    def create_job(self, payload: JobCreate, context: OwnerContext) -> Job:
        context.assert_writable()
        job = Job(
            owner_id=context.owner_id,
            company=payload.company,
            position=payload.position,
            status=payload.status,
            job_type=payload.job_type,
            job_location=payload.job_location,
        )
        self.jobs.save(job)
        record_job_mutation("create")
        self._log(context).info("Created job", extra={"job_id": job.id})
        return job

    def update_job(self, job_id: int, patch: JobUpdate, context: OwnerContext) -> Job:
        context.assert_writable()
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        for name in _REQUIRED_TEXT_FIELDS:
            if name not in changes:
                continue
            changes[name] = changes[name].strip()
            if not changes[name]:
                raise BadRequestError("Company or Position fields cannot be empty")

        job = self.get_job(job_id, context)
        for name, value in changes.items():
            setattr(job, name, value)
        self.jobs.commit_and_refresh(job)
        record_job_mutation("update")
        self._log(context).info(
            "Updated job", extra={"job_id": job.id, "fields": sorted(changes)}
        )
        return job

    def delete_job(self, job_id: int, context: OwnerContext) -> None:
        context.assert_writable()
        job = self.get_job(job_id, context)
        self.jobs.delete(job)
        record_job_mutation("delete")
        self._log(context).info("Deleted job", extra={"job_id": job_id})
