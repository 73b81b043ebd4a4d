"""Account registration, login and profile updates."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from jobtracker.core.auth import create_access_token, get_password_hash, verify_password
from jobtracker.core.metrics import record_auth_attempt
from jobtracker.db import User
from jobtracker.domain.context import OwnerContext
from jobtracker.domain.exceptions import BadRequestError, ConflictError, UnauthorizedError
from jobtracker.repositories import UserRepository
from jobtracker.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    UpdateUserRequest,
    validate_email_format,
)

logger = logging.getLogger(__name__)


class UserService:
    """Issues tokens for users and keeps their profile current."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)

    def register(self, payload: RegisterRequest) -> tuple[User, str]:
        if self.users.get_by_email(payload.email):
            record_auth_attempt("register", success=False)
            raise ConflictError("Email already registered")

        user = User(
            name=payload.name,
            email=payload.email,
            hashed_password=get_password_hash(payload.password),
        )
        self.users.save(user)
        record_auth_attempt("register", success=True)
        logger.info("Registered user", extra={"user_id": user.id})
        return user, create_access_token(user)

    def login(self, payload: LoginRequest) -> tuple[User, str]:
        user = self.users.get_by_email(payload.email)
        if not user or not verify_password(payload.password, user.hashed_password):
            record_auth_attempt("login", success=False)
            logger.warning("Rejected login attempt")
            raise UnauthorizedError("Invalid credentials")
        record_auth_attempt("login", success=True)
        return user, create_access_token(user)

    def update_profile(self, payload: UpdateUserRequest, context: OwnerContext) -> tuple[User, str]:
        context.assert_writable()
        values = payload.model_dump()
        if any(value is None or not value.strip() for value in values.values()):
            raise BadRequestError("Please provide all values")
        try:
            email = validate_email_format(values["email"])
        except ValueError as exc:
            raise BadRequestError(str(exc)) from exc

        existing = self.users.get_by_email(email)
        if existing and existing.id != context.owner_id:
            raise ConflictError("Email already registered")

        user = context.user
        user.email = email
        user.name = values["name"].strip()
        user.last_name = values["last_name"].strip()
        user.location = values["location"].strip()
        self.users.commit_and_refresh(user)
        logger.info("Updated user profile", extra={"user_id": user.id})
        return user, create_access_token(user)
