"""Database module initialization."""

from .models import JOB_STATUSES, JOB_TYPES, MAX_ID, MAX_ROW_BOUND, Base, Job, User
from .session import SessionLocal, engine, get_db

__all__ = [
    "Base",
    "Job",
    "JOB_STATUSES",
    "JOB_TYPES",
    "MAX_ID",
    "MAX_ROW_BOUND",
    "User",
    "get_db",
    "engine",
    "SessionLocal",
]
