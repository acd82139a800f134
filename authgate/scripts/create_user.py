"""
Create a user (e.g. first admin). Run from project root:
  python -m authgate.scripts.create_user USERNAME EMAIL PASSWORD [role ...]
Example:
  python -m authgate.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from authgate.core.database import SessionLocal
from authgate.core.errors import AuthGateError
from authgate.schemas.auth import SignupRequest
from authgate.services.auth_service import register_user
from authgate.services.credential_store import CredentialStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an AuthGate user from the command line.")
    parser.add_argument("username", help="Username (3-100 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-120 chars)")
    parser.add_argument(
        "roles",
        nargs="*",
        default=None,
        help="Roles to grant: user, mod, admin (default: user)",
    )
    args = parser.parse_args(argv)

    body = SignupRequest(
        username=args.username,
        email=args.email,
        password=args.password,
        role=args.roles or None,
    )
    db = SessionLocal()
    try:
        register_user(CredentialStore(db), body)
    except AuthGateError as e:
        print(e.message, file=sys.stderr)
        return 1
    except SQLAlchemyError:
        logger.exception("Could not create user %r", body.username)
        return 1
    finally:
        db.close()
    print(f"Created user '{body.username.strip()}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
