"""FastAPI dependencies that assemble services for a request."""

from fastapi import Depends
from sqlalchemy.orm import Session

from jobtracker.core.auth import get_current_user
from jobtracker.db import User, get_db
from jobtracker.domain import OwnerContext
from jobtracker.services import JobService, UserService


def get_owner_context(user: User = Depends(get_current_user)) -> OwnerContext:
    """Scope for job endpoints: the authenticated user and nothing else."""
    return OwnerContext(user=user)


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)
