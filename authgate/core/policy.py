"""Static per-path access rules, evaluated on every request before the handler."""

from enum import Enum


class AccessRule(str, Enum):
    PERMIT_ALL = "permit_all"
    AUTHENTICATED = "authenticated"


# Paths outside the API prefix that anyone may reach.
PUBLIC_PATHS = ("/", "/docs", "/redoc", "/openapi.json")

# Ordered (prefix relative to API_PREFIX, rule); first match wins.
API_RULES: tuple[tuple[str, AccessRule], ...] = (
    ("/auth", AccessRule.PERMIT_ALL),
    ("/test/all", AccessRule.PERMIT_ALL),
    ("/health", AccessRule.PERMIT_ALL),
)

DEFAULT_RULE = AccessRule.AUTHENTICATED


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def rule_for(path: str, api_prefix: str) -> AccessRule:
    """Return the access rule that governs `path`."""
    if path in PUBLIC_PATHS or path.startswith("/docs/"):
        return AccessRule.PERMIT_ALL
    for prefix, rule in API_RULES:
        if _matches(path, f"{api_prefix}{prefix}"):
            return rule
    return DEFAULT_RULE
