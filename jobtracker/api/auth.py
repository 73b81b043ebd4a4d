"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from jobtracker.core import settings
from jobtracker.dependencies import get_owner_context, get_user_service
from jobtracker.domain.context import OwnerContext
from jobtracker.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
)
from jobtracker.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

# Rate limiter for credential endpoints - disabled during testing
limiter = Limiter(key_func=get_remote_address, enabled=not settings.testing)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.auth_rate_limit)
def register(
    request: Request,
    payload: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> AuthResponse:
    """Create an account and return it with a bearer token."""
    user, token = service.register(payload)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.auth_rate_limit)
def login(
    request: Request,
    payload: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> AuthResponse:
    """Exchange email and password for a bearer token."""
    user, token = service.login(payload)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.patch("/updateUser", response_model=AuthResponse)
def update_user(
    payload: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
    context: OwnerContext = Depends(get_owner_context),
) -> AuthResponse:
    """Replace the caller's profile fields and reissue the token."""
    user, token = service.update_profile(payload, context)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)
