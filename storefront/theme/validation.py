"""Theme validation boundary.

`validate_theme` is used on the way in (drafts and merged updates) and
raises; `parse_theme_record` is used on the way out of storage and returns
a ThemeResult instead of raising, so a single bad row never takes a listing
down. Neither touches the database.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from storefront.errors import ValidationError
from storefront.models.schemas import ColorTheme, ThemeDraft

# Fields an update may not change. Activation owns is_active.
IMMUTABLE_FIELDS = ("id", "is_active", "created_at", "updated_at")


@dataclass(frozen=True)
class ThemeResult:
    """Ok(theme) | Err(ValidationError)."""

    theme: Optional[ColorTheme] = None
    error: Optional[ValidationError] = None

    @classmethod
    def ok(cls, theme: ColorTheme) -> "ThemeResult":
        return cls(theme=theme)

    @classmethod
    def err(cls, error: ValidationError) -> "ThemeResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ColorTheme:
        if self.error is not None:
            raise self.error
        return self.theme


def _as_dict(candidate: Union[Mapping[str, Any], BaseModel]) -> Dict[str, Any]:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump(by_alias=True, exclude_unset=True)
    if isinstance(candidate, Mapping):
        return dict(candidate)
    raise ValidationError(f"Theme must be a mapping, got {type(candidate).__name__}")


def validate_theme(candidate: Union[Mapping[str, Any], BaseModel]) -> ThemeDraft:
    """Validate a draft theme and apply defaults (version=1, is_active=False).

    Raises ValidationError listing every problem found.
    """
    data = _as_dict(candidate)
    try:
        return ThemeDraft.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def merge_theme(current: Mapping[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow merge: provided top-level keys overwrite, the rest are kept."""
    if not isinstance(updates, Mapping):
        raise ValidationError("Theme updates must be a mapping")
    for key in IMMUTABLE_FIELDS:
        if key in updates and updates[key] != current.get(key):
            raise ValidationError(
                f"{key} cannot be changed by an update",
                [{"loc": key, "msg": "field is not updatable"}],
            )
    merged = dict(current)
    merged.update(updates)
    return merged


def parse_theme_record(record: Mapping[str, Any]) -> ThemeResult:
    """Strictly parse a stored record into a ColorTheme."""
    try:
        return ThemeResult.ok(ColorTheme.model_validate(dict(record)))
    except PydanticValidationError as exc:
        return ThemeResult.err(ValidationError.from_pydantic(exc))
    except (TypeError, ValueError) as exc:
        return ThemeResult.err(ValidationError(f"Unreadable theme record: {exc}"))
