"""Accessibility reports for theme colors (WCAG contrast)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Mapping

from .colors import contrast_ratio, required_ratio

WHITE = "#FFFFFF"
BLACK = "#000000"


@dataclass(frozen=True)
class AccessibilityReport:
    ratio: float
    normal_text: bool
    large_text: bool
    wcag_aa: bool
    wcag_aaa: bool

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def check_accessibility(foreground: str, background: str) -> AccessibilityReport:
    """Full contrast report for a foreground/background pair.

    Raises ColorParseError for unparseable input; use `is_accessible` on
    render paths instead.
    """
    ratio = contrast_ratio(foreground, background)
    return AccessibilityReport(
        ratio=round(ratio, 2),
        normal_text=ratio >= required_ratio("normal"),
        large_text=ratio >= required_ratio("large"),
        wcag_aa=ratio >= required_ratio("AA"),
        wcag_aaa=ratio >= required_ratio("AAA"),
    )


def generate_a11y_report(colors: Mapping[str, str]) -> Dict[str, Dict[str, object]]:
    """Contrast of every color as text on white/black and as a background."""
    report: Dict[str, Dict[str, object]] = {}
    for key, value in colors.items():
        report[key] = {
            "on_white": check_accessibility(value, WHITE),
            "on_black": check_accessibility(value, BLACK),
            "as_background": {
                "with_white_text": check_accessibility(WHITE, value),
                "with_black_text": check_accessibility(BLACK, value),
            },
        }
    return report
