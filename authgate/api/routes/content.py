"""Role-gated demonstration content, one endpoint per access level."""

from typing import Annotated

from fastapi import APIRouter, Depends

from authgate.api.deps import require_roles
from authgate.models import RoleName
from authgate.schemas.auth import MessageResponse, Principal

router = APIRouter()


@router.get("/all", response_model=MessageResponse)
def all_access() -> MessageResponse:
    return MessageResponse(message="Public Content.")


@router.get("/user", response_model=MessageResponse)
def user_access(
    _principal: Annotated[
        Principal,
        Depends(
            require_roles(RoleName.ROLE_USER, RoleName.ROLE_MODERATOR, RoleName.ROLE_ADMIN)
        ),
    ],
) -> MessageResponse:
    return MessageResponse(message="User Content.")


@router.get("/mod", response_model=MessageResponse)
def moderator_access(
    _principal: Annotated[Principal, Depends(require_roles(RoleName.ROLE_MODERATOR))],
) -> MessageResponse:
    return MessageResponse(message="Moderator Board.")


@router.get("/admin", response_model=MessageResponse)
def admin_access(
    _principal: Annotated[Principal, Depends(require_roles(RoleName.ROLE_ADMIN))],
) -> MessageResponse:
    return MessageResponse(message="Admin Board.")
