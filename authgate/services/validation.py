"""Explicit input validation for auth payloads, run before any domain logic."""

import re
from dataclasses import dataclass, field

from authgate.models.role import RoleName
from authgate.schemas.auth import LoginRequest, SignupRequest

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 100
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 120

# local@domain.tld; deliberately loose, uniqueness is the store's job.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Short names accepted in signup requests, alongside the full ROLE_* names.
ROLE_ALIASES: dict[str, RoleName] = {
    "user": RoleName.ROLE_USER,
    "mod": RoleName.ROLE_MODERATOR,
    "moderator": RoleName.ROLE_MODERATOR,
    "admin": RoleName.ROLE_ADMIN,
}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult:
    """Outcome of validating one payload; valid when no errors were collected."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_message(self) -> str | None:
        return self.errors[0].message if self.errors else None

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, message=message))


def validate_signup(body: SignupRequest) -> ValidationResult:
    """Check field presence and length rules for a signup payload."""
    result = ValidationResult()

    username = body.username.strip()
    if not username:
        result.add("username", "Error: Username is required.")
    elif not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        result.add(
            "username",
            f"Error: Username must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters.",
        )

    email = body.email.strip()
    if not email:
        result.add("email", "Error: Email is required.")
    elif len(email) > EMAIL_MAX_LEN:
        result.add("email", f"Error: Email must be at most {EMAIL_MAX_LEN} characters.")
    elif not EMAIL_PATTERN.match(email):
        result.add("email", "Error: Email is not a valid address.")

    if not body.password or not body.password.strip():
        result.add("password", "Error: Password is required.")
    elif not (PASSWORD_MIN_LEN <= len(body.password) <= PASSWORD_MAX_LEN):
        result.add(
            "password",
            f"Error: Password must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters.",
        )

    return result


def validate_signin(body: LoginRequest) -> ValidationResult:
    """Signin only requires both fields to be present."""
    result = ValidationResult()
    if not body.username.strip():
        result.add("username", "Error: Username is required.")
    if not body.password:
        result.add("password", "Error: Password is required.")
    return result


def parse_role_name(raw: str) -> RoleName | None:
    """Map a requested role string to a RoleName; None if it is not a known role."""
    key = raw.strip()
    alias = ROLE_ALIASES.get(key.lower())
    if alias is not None:
        return alias
    try:
        return RoleName(key.upper())
    except ValueError:
        return None
