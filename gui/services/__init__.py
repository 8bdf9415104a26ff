from .theme_service import ThemeService
from .style_service import DocumentStyleTarget, FileStyleTarget, style_target_from_settings

__all__ = [
    "ThemeService",
    "DocumentStyleTarget",
    "FileStyleTarget",
    "style_target_from_settings",
]
