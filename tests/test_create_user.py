"""Tests for the create_user CLI."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from authgate.models import RoleName, User
from authgate.scripts import create_user
from authgate.services.credential_store import CredentialStore
from helpers import make_session_factory


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.factory = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.engine.dispose()

    def test_creates_admin(self) -> None:
        code = create_user.main(["root", "root@x.com", "secret-pass", "admin"])
        self.assertEqual(code, 0)
        with self.factory() as session:
            user = CredentialStore(session).find_by_username("root")
            self.assertEqual([r.name for r in user.roles], [RoleName.ROLE_ADMIN])

    def test_defaults_to_user_role(self) -> None:
        self.assertEqual(create_user.main(["alice", "a@x.com", "secret1"]), 0)
        with self.factory() as session:
            user = CredentialStore(session).find_by_username("alice")
            self.assertEqual([r.name for r in user.roles], [RoleName.ROLE_USER])

    def test_duplicate_username_fails(self) -> None:
        self.assertEqual(create_user.main(["alice", "a@x.com", "secret1"]), 0)
        with patch("sys.stderr"):
            code = create_user.main(["alice", "other@x.com", "secret1"])
        self.assertEqual(code, 1)
        with self.factory() as session:
            self.assertEqual(session.query(User).count(), 1)

    def test_unknown_role_fails(self) -> None:
        with patch("sys.stderr"):
            code = create_user.main(["alice", "a@x.com", "secret1", "wizard"])
        self.assertEqual(code, 1)

    def test_persistence_failure_exits_with_1(self) -> None:
        boom = OperationalError("SELECT 1", {}, Exception("connection refused"))
        with patch.object(CredentialStore, "exists_by_username", side_effect=boom), patch.object(
            create_user.logger, "exception"
        ) as log_exception:
            code = create_user.main(["alice", "a@x.com", "secret1"])
        self.assertEqual(code, 1)
        log_exception.assert_called_once()


if __name__ == "__main__":
    unittest.main()
