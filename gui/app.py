"""Main GUI application object.

Owns the per-session ThemeContext: `start()` builds and initializes it,
`shutdown()` tears it down. Views receive the context from the app rather
than reaching for global state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from gui.services.style_service import style_target_from_settings
from gui.services.theme_service import ThemeService
from gui.state import AppState, ThemeContext
from gui.theme import resolve_colors
from gui.utils.notifications import Notifier
from storefront.config import Settings, get_settings


@dataclass
class StorefrontApp:
    state: AppState = field(default_factory=AppState)
    settings: Settings = field(default_factory=get_settings)
    service: Optional[ThemeService] = None
    style_target: Optional[object] = None
    notifier: Notifier = field(default_factory=Notifier)
    theme: Optional[ThemeContext] = None

    def start(self) -> ThemeContext:
        """Begin a session: create and initialize the theme context."""
        if self.theme is None:
            self.theme = ThemeContext(
                service=self.service or ThemeService(),
                style_target=self.style_target or style_target_from_settings(self.settings),
                notifier=self.notifier,
                dark_mode_query=self.settings.theme_dark_mode_query,
            )
        self.theme.initialize()
        return self.theme

    def shutdown(self) -> None:
        if self.theme is not None:
            self.theme.close()
            self.theme = None

    def switch_view(self, view_name: str) -> None:
        """Switch the active view."""

        self.state.current_view = view_name

    def chrome_colors(self):
        """Colors for the header/footer chrome of the current view."""
        return resolve_colors(self.theme)
