"""Path-rule gate applied before routing, so unknown routes are not revealed to anonymous callers."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from authgate.api.deps import UNAUTHORIZED_MESSAGE
from authgate.core.config import get_settings
from authgate.core.policy import AccessRule, rule_for
from authgate.core.security import verify_access_token


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class AccessPolicyMiddleware(BaseHTTPMiddleware):
    """
    Reject requests to AUTHENTICATED paths that carry no valid bearer token.

    Only the token is checked here; loading the principal (and rejecting
    tokens whose user no longer exists) is left to authentication_filter,
    which runs once the route has matched.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return await call_next(request)

        rule = rule_for(request.url.path, get_settings().API_PREFIX)
        if rule is AccessRule.PERMIT_ALL:
            return await call_next(request)

        token = _bearer_token(request)
        if token is None or verify_access_token(token) is None:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"message": UNAUTHORIZED_MESSAGE},
                headers={"WWW-Authenticate": "Bearer"},
            )
        return await call_next(request)
