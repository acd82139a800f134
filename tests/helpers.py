"""Shared builders for tests: an isolated SQLite store with the roles seeded."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from authgate.models import Base, Role, RoleName


def make_session_factory() -> tuple[Engine, sessionmaker]:
    """Fresh in-memory database with tables created and every RoleName seeded."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as session:
        session.add_all([Role(name=name) for name in RoleName])
        session.commit()
    return engine, factory


def override_get_db(factory: sessionmaker):
    """Build a get_db replacement bound to `factory`."""

    def _get_db() -> Generator[Session, None, None]:
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db
