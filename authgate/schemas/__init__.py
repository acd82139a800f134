"""Pydantic request/response schemas."""

from authgate.schemas.auth import (
    JwtResponse,
    LoginRequest,
    MessageResponse,
    Principal,
    SecurityContext,
    SignupRequest,
    UserProfile,
)
from authgate.schemas.health import HealthResponse
from authgate.schemas.users import UserListItem, UsersListResponse

__all__ = [
    "HealthResponse",
    "JwtResponse",
    "LoginRequest",
    "MessageResponse",
    "Principal",
    "SecurityContext",
    "SignupRequest",
    "UserListItem",
    "UserProfile",
    "UsersListResponse",
]
