"""Theme repository: create, update, list and activate color themes.

These functions provide a small abstraction over SQLAlchemy sessions. Every
row leaving this module passes through `parse_theme_record`, so callers only
ever see validated ColorTheme objects.

Activation is exclusive: at most one theme is active. Deactivating the other
themes and activating the target happen in one transaction, so readers never
observe zero or two active themes.
"""
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel
from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.errors import ActivationError, ThemeNotFoundError
from storefront.models.schemas import ColorTheme
from storefront.theme.validation import merge_theme, parse_theme_record, validate_theme
from storefront.utils.logger import get_logger

from .models import ColorThemeRecord, utcnow

logger = get_logger(__name__)

ThemeInput = Union[Mapping[str, Any], BaseModel]


def _to_theme(record: ColorThemeRecord) -> ColorTheme:
    return parse_theme_record(record.to_dict()).unwrap()


def _deactivate_others(session: Session, theme_id: Optional[int]) -> None:
    stmt = update(ColorThemeRecord).where(ColorThemeRecord.is_active.is_(True))
    if theme_id is not None:
        stmt = stmt.where(ColorThemeRecord.id != theme_id)
    session.execute(stmt.values(is_active=False))


def list_themes(session: Session) -> List[ColorTheme]:
    """Return all valid themes, newest first.

    Rows that no longer pass validation are logged and skipped.
    """
    rows = session.execute(
        select(ColorThemeRecord).order_by(
            ColorThemeRecord.created_at.desc(), ColorThemeRecord.id.desc()
        )
    ).scalars()

    themes: List[ColorTheme] = []
    for row in rows:
        result = parse_theme_record(row.to_dict())
        if result.is_ok:
            themes.append(result.theme)
        else:
            logger.warning("Skipping invalid theme id=%s: %s", row.id, result.error)
    return themes


def get_theme(session: Session, theme_id: int) -> Optional[ColorTheme]:
    record = session.get(ColorThemeRecord, theme_id)
    return _to_theme(record) if record is not None else None


def get_active_theme(session: Session) -> Optional[ColorTheme]:
    record = session.execute(
        select(ColorThemeRecord).where(ColorThemeRecord.is_active.is_(True))
    ).scalars().first()
    return _to_theme(record) if record is not None else None


def create_theme(session: Session, draft: ThemeInput) -> ColorTheme:
    """Validate and insert a theme.

    The first theme ever created is activated automatically. Later themes
    start inactive unless the draft explicitly sets is_active=True, in which
    case the other themes are deactivated in the same transaction.
    """
    validated = validate_theme(draft)
    requested_active = "is_active" in validated.model_fields_set and validated.is_active

    try:
        is_first = session.execute(select(func.count(ColorThemeRecord.id))).scalar_one() == 0
        activate = is_first or requested_active
        if activate and not is_first:
            _deactivate_others(session, None)

        record = ColorThemeRecord(**validated.to_storage(), is_active=activate)
        session.add(record)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    session.refresh(record)
    logger.info("Created theme id=%s name=%r active=%s", record.id, record.name, record.is_active)
    return _to_theme(record)


def update_theme(session: Session, theme_id: int, updates: Mapping[str, Any]) -> ColorTheme:
    """Merge `updates` into a stored theme, re-validate and save it."""
    record = session.get(ColorThemeRecord, theme_id)
    if record is None:
        raise ThemeNotFoundError(theme_id)

    merged = merge_theme(record.to_dict(), updates)
    validated = validate_theme(merged)

    try:
        for key, value in validated.to_storage().items():
            setattr(record, key, value)
        record.updated_at = utcnow()
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    session.refresh(record)
    logger.info("Updated theme id=%s fields=%s", theme_id, sorted(updates))
    return _to_theme(record)


def activate_theme(session: Session, theme_id: int) -> ColorTheme:
    """Make `theme_id` the only active theme.

    Phase 1 deactivates every other theme, phase 2 activates the target;
    both are committed together. On any failure the transaction is rolled
    back, the previous active theme stays active, and ActivationError is
    raised.
    """
    try:
        record = session.get(ColorThemeRecord, theme_id)
        if record is None:
            raise ActivationError(f"Cannot activate theme {theme_id!r}: not found")
        parsed = parse_theme_record(record.to_dict())
        if not parsed.is_ok:
            raise ActivationError(f"Cannot activate theme {theme_id!r}: {parsed.error}")

        _deactivate_others(session, theme_id)
        session.flush()
        record.is_active = True
        session.commit()
    except ActivationError:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Activation of theme id=%s rolled back: %s", theme_id, exc)
        raise ActivationError(f"Failed to activate theme {theme_id!r}") from exc

    session.refresh(record)
    logger.info("Activated theme id=%s", theme_id)
    return _to_theme(record)
