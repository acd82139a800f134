"""Integration tests for CredentialStore against an in-memory SQLite database."""

import unittest

from sqlalchemy.exc import InvalidRequestError

from authgate.core.errors import DuplicateUserError, ValidationFailedError
from authgate.models import RoleName, User
from authgate.services.credential_store import CredentialStore
from helpers import make_session_factory


class CredentialStoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.factory = make_session_factory()
        self.session = self.factory()
        self.store = CredentialStore(self.session)

    def tearDown(self) -> None:
        self.session.close()
        self.engine.dispose()

    def _add_user(self, username: str, email: str, *roles: RoleName) -> User:
        user = User(
            username=username,
            email=email,
            password_hash="$2b$04$notarealhashbutlongenoughforthecolumn",
            roles=[self.store.find_role_by_name(r) for r in roles],
        )
        return self.store.save(user)


class TestLookups(CredentialStoreTestCase):
    def test_exists_checks(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        self.assertTrue(self.store.exists_by_username("alice"))
        self.assertFalse(self.store.exists_by_username("bob"))
        self.assertTrue(self.store.exists_by_email("a@x.com"))
        self.assertFalse(self.store.exists_by_email("b@x.com"))

    def test_find_by_username_loads_roles(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER, RoleName.ROLE_ADMIN)
        self.session.expunge_all()
        user = self.store.find_by_username("alice")
        self.assertIsNotNone(user)
        self.assertEqual(
            {r.name for r in user.roles},
            {RoleName.ROLE_USER, RoleName.ROLE_ADMIN},
        )

    def test_find_by_username_missing(self) -> None:
        self.assertIsNone(self.store.find_by_username("ghost"))

    def test_find_by_email(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        self.session.expunge_all()
        user = self.store.find_by_email("a@x.com")
        self.assertEqual(user.username, "alice")
        self.assertEqual([r.name for r in user.roles], [RoleName.ROLE_USER])

    def test_roles_are_never_loaded_implicitly(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        self.session.expunge_all()
        user = self.session.query(User).filter(User.username == "alice").one()
        with self.assertRaises(InvalidRequestError):
            _ = user.roles

    def test_find_role_by_name_for_every_seeded_role(self) -> None:
        for name in RoleName:
            role = self.store.find_role_by_name(name)
            self.assertIsNotNone(role)
            self.assertIs(role.name, name)

    def test_list_users_ordered_with_roles(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        self._add_user("bob", "b@x.com", RoleName.ROLE_MODERATOR)
        self.session.expunge_all()
        users = self.store.list_users()
        self.assertEqual([u.username for u in users], ["alice", "bob"])
        self.assertEqual([r.name for r in users[1].roles], [RoleName.ROLE_MODERATOR])
        self.assertIsNotNone(users[0].created_at)


class TestSave(CredentialStoreTestCase):
    def test_save_assigns_id_and_timestamps(self) -> None:
        user = self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        self.assertIsNotNone(user.id)
        self.assertIsNotNone(user.created_at)
        self.assertIsNotNone(user.updated_at)

    def test_duplicate_username_conflict_leaves_store_unchanged(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        with self.assertRaises(DuplicateUserError) as ctx:
            self._add_user("alice", "other@x.com", RoleName.ROLE_USER)
        self.assertIsInstance(ctx.exception, ValidationFailedError)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(self.session.query(User).count(), 1)
        self.assertFalse(self.store.exists_by_email("other@x.com"))

    def test_duplicate_email_conflict(self) -> None:
        self._add_user("alice", "a@x.com", RoleName.ROLE_USER)
        with self.assertRaises(DuplicateUserError):
            self._add_user("bob", "a@x.com", RoleName.ROLE_USER)
        self.assertEqual(self.session.query(User).count(), 1)


if __name__ == "__main__":
    unittest.main()
