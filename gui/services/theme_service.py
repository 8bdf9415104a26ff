"""Theme persistence for the GUI.

Owns session lifetimes around the repository functions and turns storage
failures into the error kinds the runtime context reports to users.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gui.utils.logging import log
from storefront.database import repository
from storefront.errors import FetchError, PersistenceError
from storefront.models.schemas import ColorTheme


class ThemeService:
    """Repository operations bound to a session factory.

    Pass a sessionmaker for tests or alternate databases; by default the
    application's SessionLocal is used and tables are created on first use.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        if session_factory is None:
            from storefront.database.engine import SessionLocal, init_db

            init_db()
            session_factory = SessionLocal
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    def fetch_themes(self) -> List[ColorTheme]:
        try:
            with self._session() as db:
                return repository.list_themes(db)
        except SQLAlchemyError as exc:
            log(f"Fetching themes failed: {exc}", logging.ERROR)
            raise FetchError("Failed to fetch themes") from exc

    def create_theme(self, draft: Any) -> ColorTheme:
        try:
            with self._session() as db:
                return repository.create_theme(db, draft)
        except SQLAlchemyError as exc:
            log(f"Creating theme failed: {exc}", logging.ERROR)
            raise PersistenceError("Failed to create theme") from exc

    def update_theme(self, theme_id: int, updates: Mapping[str, Any]) -> ColorTheme:
        try:
            with self._session() as db:
                return repository.update_theme(db, theme_id, updates)
        except SQLAlchemyError as exc:
            log(f"Updating theme {theme_id} failed: {exc}", logging.ERROR)
            raise PersistenceError(f"Failed to update theme {theme_id}") from exc

    def set_active_theme(self, theme_id: int) -> ColorTheme:
        with self._session() as db:
            return repository.activate_theme(db, theme_id)
