import logging
from unittest.mock import patch

from storefront.config import get_settings
from storefront.utils.logger import setup_logging


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SF_LOG_LEVEL", "debug")
    monkeypatch.setenv("THEME_STYLE_ELEMENT_ID", "shop-theme")
    settings = get_settings()
    assert settings.log_level == "debug"
    assert settings.theme_style_element_id == "shop-theme"


def test_setup_logging_defaults_to_configured_level(monkeypatch):
    monkeypatch.setenv("SF_LOG_LEVEL", "warning")
    with patch("storefront.utils.logger.logging.basicConfig") as basic_config:
        setup_logging()
    assert basic_config.call_args.kwargs["level"] == logging.WARNING


def test_setup_logging_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("SF_LOG_LEVEL", "warning")
    with patch("storefront.utils.logger.logging.basicConfig") as basic_config:
        setup_logging("error")
    assert basic_config.call_args.kwargs["level"] == logging.ERROR
