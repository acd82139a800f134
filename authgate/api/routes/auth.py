"""Signup, signin and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from authgate.api.deps import get_credential_store, get_current_principal
from authgate.schemas.auth import (
    JwtResponse,
    LoginRequest,
    MessageResponse,
    Principal,
    SignupRequest,
    UserProfile,
)
from authgate.services.auth_service import authenticate_user, register_user
from authgate.services.credential_store import CredentialStore

router = APIRouter()


@router.post("/signup", response_model=MessageResponse)
def signup(
    body: SignupRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> MessageResponse:
    """
    Register a new user. Username and email must be unique; `role` may list
    "user", "mod" or "admin" and defaults to "user".
    """
    return register_user(store, body)


@router.post("/signin", response_model=JwtResponse)
def signin(
    body: LoginRequest,
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> JwtResponse:
    """
    Authenticate with username and password; returns a JWT and the user profile.
    Include the token in the Authorization header as: Bearer <token>
    """
    return authenticate_user(store, body)


@router.get("/me", response_model=UserProfile)
def me(principal: Annotated[Principal, Depends(get_current_principal)]) -> UserProfile:
    """Profile of the user the bearer token belongs to."""
    return UserProfile(
        id=principal.id,
        username=principal.username,
        email=principal.email,
        roles=sorted(name.value for name in principal.authorities),
    )
