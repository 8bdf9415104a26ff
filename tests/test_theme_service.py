from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from storefront.errors import FetchError, PersistenceError


def db_down(statement="SELECT"):
    return OperationalError(statement, {}, Exception("database is locked"))


def test_fetch_themes_maps_storage_failure(service):
    with patch.object(Session, "execute", side_effect=db_down()):
        with pytest.raises(FetchError) as excinfo:
            service.fetch_themes()
    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_create_theme_maps_storage_failure(service, draft):
    with patch.object(Session, "commit", side_effect=db_down("COMMIT")):
        with pytest.raises(PersistenceError):
            service.create_theme(draft("Unsaved"))
    assert service.fetch_themes() == []


def test_update_theme_maps_storage_failure(service, draft):
    theme = service.create_theme(draft("Stored"))
    with patch.object(Session, "commit", side_effect=db_down("COMMIT")):
        with pytest.raises(PersistenceError):
            service.update_theme(theme.id, {"name": "Renamed"})
    assert [t.name for t in service.fetch_themes()] == ["Stored"]


def test_context_reports_create_storage_failure(context, draft):
    with patch.object(Session, "commit", side_effect=db_down("COMMIT")):
        assert context.create_theme(draft("Unsaved")) is None

    notes = context.notifier.drain()
    assert [n.kind for n in notes] == ["error"]
    assert "Failed to create theme" in notes[0].message
    assert context.themes == []
    assert context.current_theme is None
