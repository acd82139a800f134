"""Response schemas for the admin user listing."""

from datetime import datetime

from pydantic import BaseModel


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    id: int
    username: str
    email: str
    roles: list[str]
    created_at: datetime | None = None


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserListItem]
