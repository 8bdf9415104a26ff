"""Base class for GUI views.

The actual UI framework is not required for tests; views hold the state a
page renders and receive the session's ThemeContext from the app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from gui.state import ThemeContext
from gui.theme import resolve_colors


@dataclass
class BaseView:
    name: str = "base"
    context: Optional[ThemeContext] = None

    def colors(self) -> Dict[str, str]:
        return resolve_colors(self.context)
