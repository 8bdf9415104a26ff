"""Pydantic schemas for theme records.

These schemas act as contracts at ingress points (editor drafts, merge
updates, rows read back from storage) so malformed themes fail fast and are
never persisted or rendered.
"""
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.theme.constants import (
    CSS_KEY_PATTERN,
    HEX_COLOR_PATTERN,
    REQUIRED_BASE_COLORS,
)

_HEX_RE = re.compile(HEX_COLOR_PATTERN)
_KEY_RE = re.compile(CSS_KEY_PATTERN)
# Characters that would break out of a custom property declaration
_UNSAFE_CSS_VALUE = re.compile(r"[;{}<>]")


def _check_hex(value: Any, label: str = "color") -> str:
    if not isinstance(value, str) or not _HEX_RE.match(value):
        raise ValueError(f"{label}: invalid hex color {value!r}")
    return value


def _check_key(key: Any) -> str:
    if not isinstance(key, str) or not _KEY_RE.match(key):
        raise ValueError(f"invalid key {key!r} (letters, digits, '-' and '_' only)")
    return key


def _check_css_values(values: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
    if values is None:
        return values
    for key, value in values.items():
        _check_key(key)
        if _UNSAFE_CSS_VALUE.search(value):
            raise ValueError(f"{key}: value contains a forbidden character")
    return values


def _check_color_map(values: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
    if values is None:
        return values
    for key, value in values.items():
        _check_key(key)
        _check_hex(value, key)
    return values


class GradientStop(BaseModel):
    color: str
    position: float = Field(ge=0, le=100)

    @field_validator("color")
    @classmethod
    def color_is_hex(cls, v: str) -> str:
        return _check_hex(v)


class Gradient(BaseModel):
    id: str = Field(min_length=1)
    name: str
    stops: List[GradientStop] = Field(min_length=2)


class TypographyBlock(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    font_family: str = Field(alias="fontFamily")
    weights: List[int] = Field(default_factory=list)
    sizes: Dict[str, str] = Field(default_factory=dict)

    @field_validator("font_family")
    @classmethod
    def font_family_safe(cls, v: str) -> str:
        if _UNSAFE_CSS_VALUE.search(v):
            raise ValueError("font family contains a forbidden character")
        return v

    @field_validator("sizes")
    @classmethod
    def sizes_safe(cls, v: Dict[str, str]) -> Dict[str, str]:
        return _check_css_values(v)


class Typography(BaseModel):
    headings: Optional[TypographyBlock] = None
    body: Optional[TypographyBlock] = None


class ThemeDraft(BaseModel):
    """A theme as submitted by the editor, before the repository assigns an id."""

    name: str
    description: Optional[str] = None
    version: int = Field(default=1, ge=1)
    is_active: bool = False
    base_colors: Dict[str, str]
    gradients: Optional[List[Gradient]] = None
    typography: Optional[Typography] = None
    shadows: Optional[Dict[str, str]] = None
    breakpoints: Optional[Dict[str, str]] = None
    dark_mode_values: Optional[Dict[str, str]] = None

    @field_validator("name")
    @classmethod
    def name_nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Theme name is required")
        return v.strip()

    @field_validator("base_colors")
    @classmethod
    def base_colors_complete(cls, v: Dict[str, str]) -> Dict[str, str]:
        missing = [key for key in REQUIRED_BASE_COLORS if key not in v]
        if missing:
            raise ValueError(f"missing required base colors: {', '.join(missing)}")
        return _check_color_map(v)

    @field_validator("dark_mode_values")
    @classmethod
    def dark_mode_colors(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        return _check_color_map(v)

    @field_validator("shadows", "breakpoints")
    @classmethod
    def css_values_safe(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        return _check_css_values(v)

    def to_storage(self) -> Dict[str, Any]:
        """Column values for persistence. `is_active` is owned by activation."""
        fields = set(ThemeDraft.model_fields) - {"is_active"}
        return self.model_dump(mode="json", by_alias=True, include=fields)


class ColorTheme(ThemeDraft):
    """A persisted theme."""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
