"""
Storefront Themes - runtime-configurable visual themes for the storefront
and admin console.

Color math, theme validation, CSS variable generation and the theme
repository live here; the session-scoped runtime context lives in `gui`.
"""

__version__ = "1.0.0"

from .errors import (
    ThemeError,
    ColorParseError,
    ValidationError,
    ActivationError,
    FetchError,
    PersistenceError,
    ThemeNotFoundError,
)

__all__ = [
    "ThemeError",
    "ColorParseError",
    "ValidationError",
    "ActivationError",
    "FetchError",
    "PersistenceError",
    "ThemeNotFoundError",
]
