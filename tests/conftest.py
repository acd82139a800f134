"""Test environment: in-memory SQLite, fixed JWT secret, cheap bcrypt rounds.

Set before any authgate module is imported, since settings are read once.
"""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789abcdef")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JWT_EXPIRE_MINUTES", "60")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
