"""Constants shared by the theme engine."""

HEX_COLOR_PATTERN = r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$"

# Keys become part of CSS custom property names (--color-<key>, --shadow-<key>)
CSS_KEY_PATTERN = r"^[A-Za-z0-9_-]+$"

REQUIRED_BASE_COLORS = ("primary", "secondary", "accent", "background", "text")

# Lightness deltas used by palette derivation (HSL lightness is 0-1)
LIGHT_STEP = 0.15
LIGHTER_STEP = 0.30

ALPHA_LEVELS = (10, 20, 50, 80)

CONTRAST_RATIO_REQUIREMENTS = {
    "normal": 4.5,
    "aa": 4.5,
    "large": 3.0,
    "aa-large": 3.0,
    "aaa": 7.0,
}

DARK_MODE_QUERY = "(prefers-color-scheme: dark)"
