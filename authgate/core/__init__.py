"""Core app configuration, database and security primitives."""

from authgate.core.config import get_settings, settings
from authgate.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
