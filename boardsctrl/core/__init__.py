"""Core app configuration, database and security."""

from boardsctrl.core.config import get_settings, settings
from boardsctrl.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
