"""Style injection targets for generated theme CSS.

A session has exactly one target. `inject` creates the style element (or
file) if absent and otherwise replaces its content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from gui.utils.logging import log
from storefront.config import Settings, get_settings


class DocumentStyleTarget:
    """Style elements in a page head, keyed by element id."""

    def __init__(self, element_id: str = "theme-styles", head: Optional[Dict[str, str]] = None):
        self.element_id = element_id
        self.head: Dict[str, str] = head if head is not None else {}
        self.injections = 0

    @property
    def css(self) -> Optional[str]:
        return self.head.get(self.element_id)

    def inject(self, css: str) -> None:
        action = "Replaced" if self.element_id in self.head else "Created"
        self.head[self.element_id] = css
        self.injections += 1
        log(f"{action} <style id={self.element_id}> ({len(css)} chars)")

    def clear(self) -> None:
        self.head.pop(self.element_id, None)


class FileStyleTarget:
    """A stylesheet file served alongside the storefront's static assets."""

    def __init__(self, path):
        self.path = Path(path)
        self.injections = 0

    @property
    def css(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def inject(self, css: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(css, encoding="utf-8")
        tmp.replace(self.path)
        self.injections += 1
        log(f"Wrote theme stylesheet {self.path}")

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


def style_target_from_settings(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    if settings.theme_css_path:
        return FileStyleTarget(settings.theme_css_path)
    return DocumentStyleTarget(settings.theme_style_element_id)
