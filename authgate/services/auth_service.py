"""Signup and signin flows: validation, credential checks, role resolution, token issuance."""

import logging

from authgate.core.errors import (
    AuthenticationFailedError,
    RoleNotFoundError,
    ValidationFailedError,
)
from authgate.core.security import create_access_token, hash_password, verify_password
from authgate.models import Role, RoleName, User
from authgate.schemas.auth import (
    JwtResponse,
    LoginRequest,
    MessageResponse,
    Principal,
    SignupRequest,
)
from authgate.services.credential_store import CredentialStore
from authgate.services.validation import parse_role_name, validate_signin, validate_signup

logger = logging.getLogger(__name__)

SIGNUP_SUCCESS_MESSAGE = "User registered successfully!"
USERNAME_TAKEN_MESSAGE = "Error: Username is already taken!"
EMAIL_TAKEN_MESSAGE = "Error: Email is already in use!"
ROLE_NOT_FOUND_MESSAGE = "Error: Role is not found."
# Same text for unknown user and wrong password so accounts cannot be enumerated.
BAD_CREDENTIALS_MESSAGE = "Error: Invalid username or password."

DEFAULT_ROLE = RoleName.ROLE_USER


def principal_from_user(user: User) -> Principal:
    """Project a user (roles already loaded) into a request-scoped principal."""
    return Principal(
        id=user.id,
        username=user.username,
        email=user.email,
        password_hash=user.password_hash,
        authorities=frozenset(role.name for role in user.roles),
    )


def resolve_roles(store: CredentialStore, requested: list[str] | None) -> list[Role]:
    """
    Map requested role strings to seeded Role rows.

    No request (or an empty list) yields the default role. Raises
    RoleNotFoundError for names outside RoleName or roles missing from the store.
    """
    names: list[RoleName] = []
    for raw in requested or []:
        name = parse_role_name(raw)
        if name is None:
            logger.info("Signup requested unknown role %r", raw)
            raise RoleNotFoundError(ROLE_NOT_FOUND_MESSAGE)
        if name not in names:
            names.append(name)
    if not names:
        names = [DEFAULT_ROLE]

    roles: list[Role] = []
    for name in names:
        role = store.find_role_by_name(name)
        if role is None:
            logger.error("Role %s is not seeded in the roles table", name.value)
            raise RoleNotFoundError(ROLE_NOT_FOUND_MESSAGE)
        roles.append(role)
    return roles


def register_user(store: CredentialStore, body: SignupRequest) -> MessageResponse:
    """Validate, check uniqueness, hash the password and persist a new user."""
    result = validate_signup(body)
    if not result.is_valid:
        raise ValidationFailedError(result.first_message or "Error: Invalid request.")

    username = body.username.strip()
    email = body.email.strip()

    if store.exists_by_username(username):
        logger.info("Signup rejected: username %r already taken", username)
        raise ValidationFailedError(USERNAME_TAKEN_MESSAGE)
    if store.exists_by_email(email):
        logger.info("Signup rejected: email already in use for username %r", username)
        raise ValidationFailedError(EMAIL_TAKEN_MESSAGE)

    roles = resolve_roles(store, body.role)

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(body.password),
        roles=roles,
    )
    store.save(user)
    logger.info(
        "Registered user %r with roles %s",
        username,
        ",".join(sorted(r.name.value for r in roles)),
    )
    return MessageResponse(message=SIGNUP_SUCCESS_MESSAGE)


def authenticate_user(store: CredentialStore, body: LoginRequest) -> JwtResponse:
    """Verify credentials and issue a bearer token with the user's profile."""
    result = validate_signin(body)
    if not result.is_valid:
        raise ValidationFailedError(result.first_message or "Error: Invalid request.")

    user = store.find_by_username(body.username.strip())
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Signin failed for username %r", body.username)
        raise AuthenticationFailedError(BAD_CREDENTIALS_MESSAGE)

    principal = principal_from_user(user)
    token = create_access_token(principal.username)
    return JwtResponse(
        token=token,
        type="Bearer",
        id=principal.id,
        username=principal.username,
        email=principal.email,
        roles=sorted(name.value for name in principal.authorities),
    )
