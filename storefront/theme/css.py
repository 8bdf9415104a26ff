"""CSS custom-property generation for themes.

Output is a pure function of the theme: the same theme always yields a
byte-identical stylesheet, so callers can compare strings to decide whether
the injected styles need replacing.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from storefront.models.schemas import Gradient, ThemeDraft

from .colors import derive_palette, parse_hex
from .constants import DARK_MODE_QUERY

Declaration = Tuple[str, str]

_NON_NAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def css_name(value: str) -> str:
    """Collapse anything outside [A-Za-z0-9_-] into single hyphens."""
    return _NON_NAME_CHARS.sub("-", value).strip("-")


def rgb_triplet(hex_color: str) -> str:
    return ", ".join(str(c) for c in parse_hex(hex_color))


def gradient_css(gradient: Gradient, angle: float = 90) -> str:
    stops = ", ".join(f"{stop.color} {stop.position:g}%" for stop in gradient.stops)
    return f"linear-gradient({angle:g}deg, {stops})"


def _color_declarations(key: str, value: str) -> List[Declaration]:
    palette = derive_palette(value)
    return [
        (f"--color-{key}", value),
        (f"--color-{key}-light", palette.light),
        (f"--color-{key}-dark", palette.dark),
        (f"--color-{key}-rgb", rgb_triplet(value)),
    ]


def root_declarations(theme: ThemeDraft) -> List[Declaration]:
    """Ordered declarations for the :root block."""
    decls: List[Declaration] = []
    for key, value in theme.base_colors.items():
        decls.extend(_color_declarations(key, value))

    typography = theme.typography
    if typography is not None:
        if typography.headings is not None:
            decls.append(("--font-family-headings", typography.headings.font_family))
        if typography.body is not None:
            decls.append(("--font-family-body", typography.body.font_family))
        for block in (typography.headings, typography.body):
            if block is None:
                continue
            for size_key, size in block.sizes.items():
                decls.append((f"--font-size-{size_key}", size))

    for key, value in (theme.shadows or {}).items():
        decls.append((f"--shadow-{key}", value))

    for index, gradient in enumerate(theme.gradients or []):
        name = css_name(gradient.id) or str(index)
        decls.append((f"--gradient-{name}", gradient_css(gradient)))

    return decls


def dark_mode_declarations(theme: ThemeDraft) -> List[Declaration]:
    decls: List[Declaration] = []
    for key, value in (theme.dark_mode_values or {}).items():
        decls.append((f"--color-{key}", value))
        decls.append((f"--color-{key}-rgb", rgb_triplet(value)))
    return decls


def theme_variables(theme: ThemeDraft) -> Dict[str, str]:
    """The :root variables as a mapping (dark-mode overrides excluded)."""
    return dict(root_declarations(theme))


def generate_theme_css(theme: ThemeDraft, dark_mode_query: str = DARK_MODE_QUERY) -> str:
    lines = [":root {"]
    lines.extend(f"  {name}: {value};" for name, value in root_declarations(theme))
    lines.append("}")

    dark = dark_mode_declarations(theme)
    if dark:
        lines.append(f"@media {dark_mode_query} {{")
        lines.append("  :root {")
        lines.extend(f"    {name}: {value};" for name, value in dark)
        lines.append("  }")
        lines.append("}")

    return "\n".join(lines) + "\n"
