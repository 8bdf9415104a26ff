"""Error kinds raised by the theme engine.

None of these are fatal: every one is recoverable by retrying the action
that triggered it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ThemeError(Exception):
    """Base class for theme engine errors."""


class ColorParseError(ThemeError, ValueError):
    """A color string could not be parsed as #RGB or #RRGGBB."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class ValidationError(ThemeError):
    """A theme, gradient or color failed validation and was not persisted.

    `issues` holds one {"loc": ..., "msg": ...} dict per problem so editors
    can show them inline next to the offending field.
    """

    def __init__(self, message: str, issues: Optional[List[Dict[str, str]]] = None):
        self.issues = issues or [{"loc": "", "msg": message}]
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        issues = [
            {
                "loc": ".".join(str(part) for part in err.get("loc", ())),
                "msg": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        summary = "; ".join(
            f"{i['loc']}: {i['msg']}" if i["loc"] else i["msg"] for i in issues
        )
        return cls(summary or "Invalid theme", issues)


class ActivationError(ThemeError):
    """Activating a theme failed; the previously active theme is unchanged."""


class FetchError(ThemeError):
    """Listing themes from storage failed."""


class PersistenceError(ThemeError):
    """Creating or updating a theme failed at the storage layer."""


class ThemeNotFoundError(ThemeError, LookupError):
    """No theme exists with the requested id."""

    def __init__(self, theme_id: Any):
        self.theme_id = theme_id
        super().__init__(f"Theme {theme_id!r} does not exist")
