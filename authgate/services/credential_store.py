"""User and role lookups/persistence over a SQLAlchemy session."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from authgate.core.errors import DuplicateUserError
from authgate.models import Role, RoleName, User

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Persistence boundary for users and roles.

    Roles are always fetched by an explicit eager option on the query that
    needs them; User.roles never lazy-loads.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists_by_username(self, username: str) -> bool:
        return (
            self.session.query(User.id).filter(User.username == username).first()
            is not None
        )

    def exists_by_email(self, email: str) -> bool:
        return self.session.query(User.id).filter(User.email == email).first() is not None

    def find_by_username(self, username: str) -> User | None:
        """Return the user with roles joined in, or None."""
        return (
            self.session.query(User)
            .options(joinedload(User.roles))
            .filter(User.username == username)
            .first()
        )

    def find_by_email(self, email: str) -> User | None:
        return (
            self.session.query(User)
            .options(joinedload(User.roles))
            .filter(User.email == email)
            .first()
        )

    def find_role_by_name(self, name: RoleName) -> Role | None:
        return self.session.query(Role).filter(Role.name == name).first()

    def list_users(self) -> list[User]:
        """All users ordered by id, roles loaded in a second SELECT."""
        return (
            self.session.query(User)
            .options(selectinload(User.roles))
            .order_by(User.id)
            .all()
        )

    def save(self, user: User) -> User:
        """
        Insert or update a user and commit.

        A unique-constraint violation (e.g. two concurrent signups for the same
        username) rolls back and raises DuplicateUserError; the store is unchanged.
        """
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("User save rejected by unique constraint: %s", e.orig)
            raise DuplicateUserError("Error: Username or email is already in use!") from e
        return user
