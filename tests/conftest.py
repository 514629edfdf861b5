"""
Test environment. Settings are read at import time, so the environment is set
here before any boardsctrl module is imported.
"""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-at-least-32-bytes-long")
os.environ.setdefault("JWT_ISSUER", "boardsctrl-test")
os.environ.setdefault("JWT_AUDIENCE", "boardsctrl-test-clients")
os.environ.setdefault("LEGACY_AUTH_BASE_URL", "https://legacy.test")
os.environ.setdefault("LEGACY_AUTH_SIGNATURE", "test-signature")
