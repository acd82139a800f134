"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from authgate.core.config import settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(subject: str) -> str:
    """Create a signed JWT access token with sub (username), iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": subject,
        "iat": now,
        "exp": expire,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )


def verify_access_token(token: str) -> str | None:
    """
    Return the token subject if signature and expiry check out, else None.

    The reason for rejection is logged but never returned, so callers cannot
    tell an expired token from a forged one.
    """
    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT rejected: token is expired")
        return None
    except jwt.InvalidSignatureError:
        logger.warning("JWT rejected: invalid signature")
        return None
    except jwt.DecodeError:
        logger.warning("JWT rejected: malformed token")
        return None
    except jwt.PyJWTError as e:
        logger.warning("JWT rejected: %s", e)
        return None

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        logger.warning("JWT rejected: empty subject claim")
        return None
    return subject
