"""Color math for theme palettes.

Pure functions over hex color strings:
- hex <-> HSL conversion
- palette derivation (light/dark/alpha variants)
- WCAG relative luminance and contrast ratio
- hue-rotation harmonies (complement, triad, tetrad, ...)

Hex input accepts 3 or 6 digits, any case, with or without the leading '#'.
Output hex is always lowercase '#rrggbb'. Everything here is deterministic.
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple, Union

from storefront.errors import ColorParseError
from storefront.utils.logger import get_logger

from .constants import (
    ALPHA_LEVELS,
    CONTRAST_RATIO_REQUIREMENTS,
    LIGHT_STEP,
    LIGHTER_STEP,
)

logger = get_logger(__name__)

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float


@dataclass(frozen=True)
class Palette:
    """Tonal variants of a single base color."""

    base: str
    light: str
    lighter: str
    dark: str
    darker: str
    alpha10: str
    alpha20: str
    alpha50: str
    alpha80: str


@dataclass(frozen=True)
class Harmony:
    """Hue-rotation harmonies of a base color. Lists start with the base."""

    complement: str
    triadic: List[str]
    tetrad: List[str]
    analogous: List[str]
    split_complement: List[str]


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def parse_hex(value: str) -> RGB:
    """Parse a hex color string into integer channels."""
    if not isinstance(value, str):
        raise ColorParseError(value)
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ColorParseError(value)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return RGB(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = (int(_clamp(c, 0, 255)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(value: str) -> str:
    """Return the canonical lowercase 6-digit form of a hex color."""
    return rgb_to_hex(parse_hex(value))


def to_hsl(hex_color: str) -> HSL:
    r, g, b = parse_hex(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(h * 360.0, s, l)


def to_hex(hsl: Union[HSL, Tuple[float, float, float]]) -> str:
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, _clamp(l), _clamp(s))
    return rgb_to_hex((round(r * 255), round(g * 255), round(b * 255)))


def with_lightness(hex_color: str, delta: float) -> str:
    """Shift HSL lightness by `delta`, clamped to [0, 1]."""
    h, s, l = to_hsl(hex_color)
    return to_hex(HSL(h, s, _clamp(l + delta)))


def rotate_hue(hex_color: str, degrees: float) -> str:
    h, s, l = to_hsl(hex_color)
    return to_hex(HSL((h + degrees) % 360.0, s, l))


def rgba(hex_color: str, alpha: float) -> str:
    r, g, b = parse_hex(hex_color)
    return f"rgba({r}, {g}, {b}, {alpha:g})"


def derive_palette(base_hex: str) -> Palette:
    alphas = {f"alpha{level}": rgba(base_hex, level / 100) for level in ALPHA_LEVELS}
    return Palette(
        base=normalize_hex(base_hex),
        light=with_lightness(base_hex, LIGHT_STEP),
        lighter=with_lightness(base_hex, LIGHTER_STEP),
        dark=with_lightness(base_hex, -LIGHT_STEP),
        darker=with_lightness(base_hex, -LIGHTER_STEP),
        **alphas,
    )


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """WCAG 2.x relative luminance in [0, 1]."""
    r, g, b = parse_hex(hex_color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color1: str, color2: str) -> float:
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def required_ratio(level: str) -> float:
    try:
        return CONTRAST_RATIO_REQUIREMENTS[level.lower()]
    except (AttributeError, KeyError):
        raise ValueError(f"Unknown accessibility level: {level!r}") from None


def is_accessible(foreground: str, background: str, level: str = "AA") -> bool:
    """Whether the pair meets the WCAG contrast level.

    Safe to call while rendering: unparseable colors yield False instead of
    raising.
    """
    threshold = required_ratio(level)
    try:
        ratio = contrast_ratio(foreground, background)
    except ColorParseError as exc:
        logger.debug("Accessibility check failed closed: %s", exc)
        return False
    return ratio >= threshold


def complementary_colors(base_hex: str) -> Harmony:
    base = normalize_hex(base_hex)
    return Harmony(
        complement=rotate_hue(base, 180),
        triadic=[base, rotate_hue(base, 120), rotate_hue(base, 240)],
        tetrad=[base] + [rotate_hue(base, d) for d in (90, 180, 270)],
        analogous=[base, rotate_hue(base, 30), rotate_hue(base, -30)],
        split_complement=[base, rotate_hue(base, 150), rotate_hue(base, 210)],
    )
