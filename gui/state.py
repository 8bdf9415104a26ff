"""Application state containers.

`ThemeContext` holds the active theme for one session. It is created at
session start, passed to whatever needs theme colors, and closed at session
end; there is no module-level theme state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from gui.utils.logging import log
from gui.utils.notifications import Notifier
from storefront.config import get_settings
from storefront.errors import ThemeError, ValidationError
from storefront.models.schemas import ColorTheme
from storefront.theme.css import generate_theme_css
from storefront.theme.presets import default_theme


class ContextState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    current_view: str = "store"
    flags: Dict[str, Any] = field(default_factory=dict)


class ThemeContext:
    """Session-scoped theme state: current theme, theme list, loading flag.

    Every mutating call re-lists themes and publishes `themes` and
    `current_theme` together once the list is back. Whenever the current
    theme changes its CSS is regenerated and injected into `style_target`.

    Storage failures become error notifications and leave state untouched;
    ValidationError propagates so editors can show it inline.
    """

    def __init__(self, service, style_target, notifier: Optional[Notifier] = None,
                 dark_mode_query: Optional[str] = None):
        self.service = service
        self.style_target = style_target
        self.notifier = notifier or Notifier()
        self.dark_mode_query = dark_mode_query or get_settings().theme_dark_mode_query

        self.state = ContextState.UNINITIALIZED
        self.current_theme: Optional[ColorTheme] = None
        self.themes: List[ColorTheme] = []
        self.loading = False
        self._injected_css: Optional[str] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        if self.state is not ContextState.READY:
            self.state = ContextState.LOADING
        self.loading = True
        try:
            themes = self.service.fetch_themes()
            if not themes:
                log("No themes stored; creating the default theme")
                self.service.create_theme(default_theme())
                themes = self.service.fetch_themes()
            self._publish(themes)
        except ThemeError as exc:
            self.notifier.error(f"Failed to fetch themes: {exc}")
        finally:
            self.loading = False

    def close(self) -> None:
        """Tear down at session end: drop injected styles and cached state."""
        if self._injected_css is not None:
            self.style_target.clear()
        self._injected_css = None
        self.current_theme = None
        self.themes = []
        self.loading = False
        self.state = ContextState.UNINITIALIZED

    def __enter__(self) -> "ThemeContext":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def ready(self) -> bool:
        return self.state is ContextState.READY

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_theme(self, theme_id: int) -> Optional[ColorTheme]:
        try:
            self.service.set_active_theme(theme_id)
            themes = self.service.fetch_themes()
        except ThemeError as exc:
            self.notifier.error(f"Failed to update theme: {exc}")
            return None
        self._publish(themes)
        self.notifier.success("Theme updated successfully")
        return self.current_theme

    def create_theme(self, draft: Mapping[str, Any]) -> Optional[ColorTheme]:
        try:
            created = self.service.create_theme(draft)
            themes = self.service.fetch_themes()
        except ValidationError:
            raise
        except ThemeError as exc:
            self.notifier.error(f"Failed to create theme: {exc}")
            return None
        self._publish(themes)
        self.notifier.success("Theme created successfully")
        return created

    def update_theme(self, theme_id: int, updates: Mapping[str, Any]) -> Optional[ColorTheme]:
        try:
            updated = self.service.update_theme(theme_id, updates)
            themes = self.service.fetch_themes()
        except ValidationError:
            raise
        except ThemeError as exc:
            self.notifier.error(f"Failed to update theme: {exc}")
            return None
        self._publish(themes)
        self.notifier.success("Theme updated successfully")
        return updated

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _publish(self, themes: List[ColorTheme]) -> None:
        active = next((t for t in themes if t.is_active), None)
        if active is None and themes:
            log("No active theme stored; falling back to static colors")
        self.themes = list(themes)
        self.current_theme = active
        self.state = ContextState.READY
        self._apply(active)

    def _apply(self, theme: Optional[ColorTheme]) -> None:
        if theme is None:
            if self._injected_css is not None:
                self.style_target.clear()
                self._injected_css = None
            return
        css = generate_theme_css(theme, self.dark_mode_query)
        if css == self._injected_css:
            return
        self.style_target.inject(css)
        self._injected_css = css
