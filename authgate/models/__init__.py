"""SQLAlchemy ORM models."""

from authgate.models.base import Base
from authgate.models.role import Role, RoleName
from authgate.models.user import User, user_roles

__all__ = ["Base", "Role", "RoleName", "User", "user_roles"]
