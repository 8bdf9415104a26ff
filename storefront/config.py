"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values are read when a Settings instance is
built, so tests can tweak os.environ before calling get_settings().
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _env(key: str, default: Optional[str] = None):
    return field(default_factory=lambda: os.getenv(key, default))


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = _env(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(PROJECT_ROOT, "data", "storefront.db"),
    )

    # Theme rendering
    theme_style_element_id: str = _env("THEME_STYLE_ELEMENT_ID", "theme-styles")
    theme_css_path: Optional[str] = _env("THEME_CSS_PATH")
    theme_dark_mode_query: str = _env(
        "THEME_DARK_MODE_QUERY", "(prefers-color-scheme: dark)"
    )

    # Logging
    log_level: str = _env("SF_LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
