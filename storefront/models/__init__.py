"""Data schemas and validation."""
from .schemas import ColorTheme, ThemeDraft, Gradient, GradientStop, Typography, TypographyBlock

__all__ = [
    "ColorTheme",
    "ThemeDraft",
    "Gradient",
    "GradientStop",
    "Typography",
    "TypographyBlock",
]
