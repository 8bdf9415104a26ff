"""Database models and session management."""
from .engine import SessionLocal, init_db, get_engine, make_session_factory
from .models import ColorThemeRecord, Base
from .repository import (
    list_themes,
    get_theme,
    get_active_theme,
    create_theme,
    update_theme,
    activate_theme,
)

__all__ = [
    "SessionLocal",
    "init_db",
    "get_engine",
    "make_session_factory",
    "ColorThemeRecord",
    "Base",
    "list_themes",
    "get_theme",
    "get_active_theme",
    "create_theme",
    "update_theme",
    "activate_theme",
]
