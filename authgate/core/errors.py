"""Error taxonomy surfaced to clients as a structured {"message": ...} body."""

from fastapi import status


class AuthGateError(Exception):
    """Base error: carries a client-safe message and the HTTP status it maps to."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationFailedError(AuthGateError):
    """Malformed input or a uniqueness violation (duplicate username/email)."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateUserError(ValidationFailedError):
    """Raised when the store rejects a user because username or email is taken."""


class RoleNotFoundError(AuthGateError):
    """Raised when a requested role name does not resolve to a seeded role."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationFailedError(AuthGateError):
    """Bad credentials or a missing/invalid/expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AccessDeniedError(AuthGateError):
    """Authenticated principal lacks the role required by the endpoint."""

    status_code = status.HTTP_403_FORBIDDEN
