"""Admin-only user listing."""

from typing import Annotated

from fastapi import APIRouter, Depends

from authgate.api.deps import get_credential_store, require_admin
from authgate.schemas.auth import Principal
from authgate.schemas.users import UserListItem, UsersListResponse
from authgate.services.credential_store import CredentialStore

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[Principal, Depends(require_admin)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> UsersListResponse:
    """List all users with their role names (admin only)."""
    return UsersListResponse(
        users=[
            UserListItem(
                id=u.id,
                username=u.username,
                email=u.email,
                roles=sorted(r.name.value for r in u.roles),
                created_at=u.created_at,
            )
            for u in store.list_users()
        ]
    )
