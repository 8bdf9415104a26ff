import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gui.services.style_service import DocumentStyleTarget
from gui.services.theme_service import ThemeService
from gui.state import ThemeContext
from storefront.database.models import Base


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    engine.dispose()


@pytest.fixture()
def service(session_factory):
    return ThemeService(session_factory)


@pytest.fixture()
def style_target():
    return DocumentStyleTarget("theme-styles")


@pytest.fixture()
def context(service, style_target):
    ctx = ThemeContext(service, style_target)
    yield ctx
    ctx.close()


@pytest.fixture()
def draft():
    def _make(name="Theme", **extra):
        data = {
            "name": name,
            "base_colors": {
                "primary": "#3B82F6",
                "secondary": "#10B981",
                "accent": "#8B5CF6",
                "background": "#FFFFFF",
                "text": "#1F2937",
            },
        }
        data.update(extra)
        return data

    return _make
