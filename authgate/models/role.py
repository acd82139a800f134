"""ORM model and closed name enumeration for roles."""

import enum

from sqlalchemy import Column, Enum, Integer

from authgate.models.base import Base


class RoleName(str, enum.Enum):
    """Fixed set of role names; rows are seeded by migration, never created at runtime."""

    ROLE_USER = "ROLE_USER"
    ROLE_MODERATOR = "ROLE_MODERATOR"
    ROLE_ADMIN = "ROLE_ADMIN"


class Role(Base):
    """Named permission grouping used for coarse-grained endpoint access control."""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(
        Enum(RoleName, name="role_name"),
        nullable=False,
        unique=True,
    )
