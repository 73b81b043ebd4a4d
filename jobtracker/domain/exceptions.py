"""Errors raised by the service layer.

Services stay free of FastAPI imports; ``jobtracker.api.errors`` decides which
HTTP status each class surfaces as.
"""


class DomainError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(DomainError):
    """A write was refused because of the submitted values or the caller's account."""


class ConflictError(DomainError):
    """The email address already belongs to another account."""


class NotFoundError(DomainError):
    """No record with that id exists within the caller's scope."""


class UnauthorizedError(DomainError):
    """Missing, malformed or stale credentials."""
