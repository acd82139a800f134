"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from authgate.core.config import settings
from authgate.core.database import check_db_connected, get_db
from authgate.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> HealthResponse:
    """Service status and database reachability; open to unauthenticated callers."""
    db_status = "connected" if check_db_connected(db) else "disconnected"
    return HealthResponse(
        status="ok",
        service="authgate",
        environment=settings.APP_ENV,
        database=db_status,
    )
