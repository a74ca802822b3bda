"""Test package. Settings are read at import time, so test defaults are set here first."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SIGN_UP_ENABLED", "true")
