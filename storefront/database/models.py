from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ColorThemeRecord(Base):
    """Stored theme row.

    Style payloads (base_colors, gradients, typography, ...) are JSON columns
    and are only trusted after passing through `parse_theme_record`.
    At most one row has is_active = True; only activation changes it.
    """

    __tablename__ = "color_themes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    version = Column(Integer, default=1, nullable=False)
    is_active = Column(Boolean, default=False, nullable=False, index=True)

    base_colors = Column(JSON, nullable=False)
    gradients = Column(JSON, nullable=True)
    typography = Column(JSON, nullable=True)
    shadows = Column(JSON, nullable=True)
    breakpoints = Column(JSON, nullable=True)
    dark_mode_values = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"ColorThemeRecord(id={self.id}, name={self.name}, is_active={self.is_active})"
