"""Admin theme editor view.

Holds the draft being edited, applies presets, previews the generated CSS
and contrast of the draft, and submits it through the ThemeContext.
Validation problems are kept in `errors` for inline display.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gui.views.base import BaseView
from storefront.errors import ColorParseError, ValidationError
from storefront.models.schemas import ColorTheme
from storefront.theme.accessibility import AccessibilityReport, check_accessibility
from storefront.theme.css import generate_theme_css
from storefront.theme.presets import apply_preset
from storefront.theme.validation import validate_theme


def blank_draft() -> Dict[str, Any]:
    return {
        "name": "",
        "description": "",
        "version": 1,
        "base_colors": {
            "primary": "#3B82F6",
            "secondary": "#10B981",
            "accent": "#8B5CF6",
            "background": "#FFFFFF",
            "text": "#1F2937",
        },
    }


@dataclass
class ThemeEditorView(BaseView):
    name: str = "themes"
    draft: Dict[str, Any] = field(default_factory=blank_draft)
    editing_id: Optional[int] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    def load(self, theme: ColorTheme) -> None:
        """Start editing an existing theme."""
        self.draft = theme.model_dump(
            mode="json",
            by_alias=True,
            exclude={"id", "is_active", "created_at", "updated_at"},
            exclude_none=True,
        )
        self.editing_id = theme.id
        self.errors = []

    def reset(self) -> None:
        self.draft = blank_draft()
        self.editing_id = None
        self.errors = []

    def set_field(self, key: str, value: Any) -> None:
        self.draft[key] = value

    def set_color(self, key: str, value: str) -> None:
        colors = dict(self.draft.get("base_colors") or {})
        colors[key] = value
        self.draft["base_colors"] = colors

    def use_preset(self, preset: str) -> None:
        self.draft = apply_preset(self.draft, preset)

    def add_gradient(self, gradient: Dict[str, Any]) -> None:
        gradients = list(self.draft.get("gradients") or [])
        gradients.append(copy.deepcopy(gradient))
        self.draft["gradients"] = gradients

    def preview_css(self) -> Optional[str]:
        """CSS for the draft, or None (with `errors` filled) if it is invalid."""
        try:
            theme = validate_theme(self.draft)
        except ValidationError as exc:
            self.errors = exc.issues
            return None
        self.errors = []
        return generate_theme_css(theme)

    def text_contrast(self) -> Optional[AccessibilityReport]:
        colors = self.draft.get("base_colors") or {}
        try:
            return check_accessibility(colors.get("text"), colors.get("background"))
        except ColorParseError:
            return None

    def submit(self) -> Optional[ColorTheme]:
        if self.context is None:
            raise RuntimeError("ThemeEditorView needs a ThemeContext to submit")
        try:
            if self.editing_id is None:
                saved = self.context.create_theme(self.draft)
            else:
                saved = self.context.update_theme(self.editing_id, self.draft)
        except ValidationError as exc:
            self.errors = exc.issues
            return None
        self.errors = []
        if saved is not None:
            self.editing_id = saved.id
        return saved
