"""API routes, mounted under settings.API_PREFIX."""

from fastapi import APIRouter

from authgate.api.routes import auth, content, health, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(content.router, prefix="/test", tags=["content"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
