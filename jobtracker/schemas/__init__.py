"""Pydantic request/response schemas."""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UpdateUserRequest, UserResponse
from .job import (
    JobCreate,
    JobEnvelope,
    JobListResponse,
    JobResponse,
    JobStatsResponse,
    JobUpdate,
    MonthlyApplicationsResponse,
    StatusCounts,
)

__all__ = [
    "AuthResponse",
    "JobCreate",
    "JobEnvelope",
    "JobListResponse",
    "JobResponse",
    "JobStatsResponse",
    "JobUpdate",
    "LoginRequest",
    "MonthlyApplicationsResponse",
    "RegisterRequest",
    "StatusCounts",
    "UpdateUserRequest",
    "UserResponse",
]
