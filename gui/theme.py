"""Theme colors for storefront chrome and admin layout.

Components read colors through `resolve_colors` / `theme_color` so they get
the active theme when one is loaded and fixed literals otherwise.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class FallbackTheme:
    """Static colors used when no theme is active."""

    primary: str = "#3B82F6"  # blue-500
    secondary: str = "#10B981"  # emerald-500
    accent: str = "#8B5CF6"  # violet-500
    background: str = "#FFFFFF"
    text: str = "#1F2937"  # gray-800

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


FALLBACK_THEME = FallbackTheme()


def resolve_colors(context=None) -> Dict[str, str]:
    """Active theme base colors layered over the fallback literals."""
    colors = FALLBACK_THEME.as_dict()
    theme = getattr(context, "current_theme", None)
    if theme is not None:
        colors.update(theme.base_colors)
    return colors


def theme_color(context, key: str, default: Optional[str] = None) -> str:
    colors = resolve_colors(context)
    if key in colors:
        return colors[key]
    return default if default is not None else colors["text"]
