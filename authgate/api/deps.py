"""
Request-scoped authentication and authorization dependencies.

authentication_filter runs once per request (FastAPI caches it) and turns an
optional bearer token into a SecurityContext. authorize_request applies the
static path rules; require_roles adds per-endpoint role checks.
"""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from authgate.core.config import get_settings
from authgate.core.database import get_db
from authgate.core.errors import AccessDeniedError, AuthenticationFailedError
from authgate.core.policy import AccessRule, rule_for
from authgate.core.security import verify_access_token
from authgate.models import RoleName
from authgate.schemas.auth import Principal, SecurityContext
from authgate.services.auth_service import principal_from_user
from authgate.services.credential_store import CredentialStore

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Error: Unauthorized"
FORBIDDEN_MESSAGE = "Error: Access denied"

bearer_scheme = HTTPBearer(auto_error=False)

ANONYMOUS = SecurityContext()


def get_credential_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    return CredentialStore(db)


def authentication_filter(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> SecurityContext:
    """
    Resolve the bearer token (if any) to a principal.

    Never raises: a missing, invalid or expired token, or a subject that no
    longer exists, all yield the anonymous context and leave the decision to
    the authorization rules.
    """
    context = ANONYMOUS
    if credentials is not None and credentials.credentials:
        username = verify_access_token(credentials.credentials)
        if username is not None:
            user = store.find_by_username(username)
            if user is None:
                logger.info("Token subject %r no longer resolves to a user", username)
            else:
                context = SecurityContext(principal=principal_from_user(user))
    request.state.security_context = context
    return context


def authorize_request(
    request: Request,
    context: Annotated[SecurityContext, Depends(authentication_filter)],
) -> None:
    """Apply the path rule table; 401 when the path needs a principal and there is none."""
    rule = rule_for(request.url.path, get_settings().API_PREFIX)
    if rule is AccessRule.AUTHENTICATED and not context.is_authenticated:
        raise AuthenticationFailedError(UNAUTHORIZED_MESSAGE)


def get_current_principal(
    context: Annotated[SecurityContext, Depends(authentication_filter)],
) -> Principal:
    """Dependency: the authenticated principal. Raises 401 for anonymous requests."""
    if context.principal is None:
        raise AuthenticationFailedError(UNAUTHORIZED_MESSAGE)
    return context.principal


def require_roles(*roles: RoleName) -> Callable[..., Principal]:
    """Dependency factory: principal must hold at least one of `roles`, else 403."""

    def dependency(
        principal: Annotated[Principal, Depends(get_current_principal)],
    ) -> Principal:
        if not principal.has_any_role(*roles):
            logger.info(
                "User %r denied: needs one of %s",
                principal.username,
                ",".join(r.value for r in roles),
            )
            raise AccessDeniedError(FORBIDDEN_MESSAGE)
        return principal

    return dependency


require_admin = require_roles(RoleName.ROLE_ADMIN)
