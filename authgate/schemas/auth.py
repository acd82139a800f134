"""Request/response schemas for auth endpoints and the request security context."""

from pydantic import BaseModel, ConfigDict, Field

from authgate.models.role import RoleName


class SignupRequest(BaseModel):
    """Registration payload. Field rules are checked by services.validation."""

    username: str = Field(..., description="Unique username (3-100 chars)")
    email: str = Field(..., description="Unique email address")
    password: str = Field(..., description="Plain-text password (6-120 chars)")
    role: list[str] | None = Field(
        default=None,
        description="Requested role names, e.g. ['admin'] or ['mod', 'user']",
    )


class LoginRequest(BaseModel):
    """Credentials for signin."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class MessageResponse(BaseModel):
    """Plain acknowledgement or error body."""

    message: str


class JwtResponse(BaseModel):
    """Signed bearer token plus the profile of the authenticated user."""

    token: str = Field(..., description="JWT access token")
    type: str = Field(default="Bearer", description="Token type")
    id: int
    username: str
    email: str
    roles: list[str]


class Principal(BaseModel):
    """Authenticated user for the current request; never persisted."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    email: str
    password_hash: str = Field(exclude=True, repr=False)
    authorities: frozenset[RoleName]

    def has_any_role(self, *roles: RoleName) -> bool:
        return bool(self.authorities.intersection(roles))


class SecurityContext(BaseModel):
    """Request-scoped authentication state; principal is None for anonymous requests."""

    model_config = ConfigDict(frozen=True)

    principal: Principal | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None


class UserProfile(BaseModel):
    """Current user profile (no password)."""

    id: int
    username: str
    email: str
    roles: list[str]
