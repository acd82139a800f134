"""SQLAlchemy declarative Base shared by users, roles and the user_roles join table."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
