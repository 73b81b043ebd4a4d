"""Authentication utilities."""

from datetime import UTC, datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from jobtracker.core.config import settings
from jobtracker.db import MAX_ID, User, get_db
from jobtracker.domain.exceptions import UnauthorizedError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
security = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password."""
    return pwd_context.hash(password)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a bearer token whose subject is the user id."""
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(UTC) + lifetime
    to_encode = {"sub": str(user.id), "name": user.name, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> int:
    """Return the user id carried by ``token``."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise UnauthorizedError("Authentication invalid") from exc
    subject = payload.get("sub")
    if payload.get("type") != "access" or subject is None:
        raise UnauthorizedError("Authentication invalid")
    try:
        return int(subject)
    except ValueError as exc:
        raise UnauthorizedError("Authentication invalid") from exc


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a stored user."""
    if credentials is None:
        raise UnauthorizedError("Authentication invalid")
    user_id = decode_access_token(credentials.credentials)
    if not 1 <= user_id <= MAX_ID:
        raise UnauthorizedError("Authentication invalid")
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise UnauthorizedError("Authentication invalid")
    return user
