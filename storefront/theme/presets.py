"""Built-in theme and color presets offered by the theme editor."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

DEFAULT_THEME: Dict[str, Any] = {
    "name": "Default Theme",
    "description": "Built-in storefront theme",
    "version": 1,
    "base_colors": {
        "primary": "#3B82F6",
        "secondary": "#10B981",
        "accent": "#8B5CF6",
        "background": "#FFFFFF",
        "text": "#1F2937",
        "shadow": "#000000",
        "background-alt": "#F3F4F6",
        "muted": "#6B7280",
        "success": "#10B981",
        "warning": "#F59E0B",
        "error": "#EF4444",
        "info": "#3B82F6",
    },
    "typography": {
        "headings": {
            "fontFamily": "Inter, system-ui, sans-serif",
            "weights": [500, 600, 700],
            "sizes": {
                "h1": "2.5rem",
                "h2": "2rem",
                "h3": "1.75rem",
                "h4": "1.5rem",
                "h5": "1.25rem",
                "h6": "1rem",
            },
        },
        "body": {
            "fontFamily": "Inter, system-ui, sans-serif",
            "weights": [400, 500],
            "sizes": {"base": "1rem", "sm": "0.875rem", "lg": "1.125rem"},
        },
    },
    "shadows": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1)",
    },
    "gradients": [
        {
            "id": "primary",
            "name": "Primary Gradient",
            "stops": [
                {"color": "#3B82F6", "position": 0},
                {"color": "#2563EB", "position": 100},
            ],
        },
        {
            "id": "secondary",
            "name": "Secondary Gradient",
            "stops": [
                {"color": "#10B981", "position": 0},
                {"color": "#059669", "position": 100},
            ],
        },
    ],
    "breakpoints": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
        "2xl": "1536px",
    },
}

COLOR_PRESETS: Dict[str, Dict[str, str]] = {
    "blue": {"primary": "#3B82F6", "secondary": "#10B981", "accent": "#8B5CF6"},
    "green": {"primary": "#10B981", "secondary": "#3B82F6", "accent": "#F59E0B"},
    "purple": {"primary": "#8B5CF6", "secondary": "#EC4899", "accent": "#3B82F6"},
}


def default_theme() -> Dict[str, Any]:
    """A fresh copy of the built-in theme, safe to mutate."""
    return copy.deepcopy(DEFAULT_THEME)


def apply_preset(draft: Mapping[str, Any], preset: str) -> Dict[str, Any]:
    """Return a copy of `draft` with the preset's colors merged into base_colors."""
    try:
        colors = COLOR_PRESETS[preset]
    except KeyError:
        raise KeyError(f"Unknown color preset: {preset!r}") from None
    result = copy.deepcopy(dict(draft))
    base = dict(result.get("base_colors") or {})
    base.update(colors)
    result["base_colors"] = base
    return result
