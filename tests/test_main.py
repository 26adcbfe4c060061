import logging

from product_catalog.__main__ import parse_settings, prepare
from product_catalog.config import DEV_API_KEY


def test_parse_settings_uses_environment():
    settings = parse_settings([], {"PORT": "8080", "HOST": "0.0.0.0", "API_KEY": "k"})
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.api_key == "k"


def test_command_line_overrides_environment():
    settings = parse_settings(
        ["--host", "10.0.0.1", "--port", "9000", "--log-level", "debug"],
        {"PORT": "8080", "HOST": "0.0.0.0", "LOG_LEVEL": "WARNING"},
    )
    assert settings.host == "10.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_prepare_warns_about_development_key(caplog):
    caplog.set_level(logging.INFO)
    app, settings = prepare([], {})
    assert settings.api_key == DEV_API_KEY
    assert app.extensions["product_settings"] is settings
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("development key" in r.getMessage() for r in warnings)
    assert any("GET /api/products/stats" in m for m in caplog.messages)


def test_prepare_with_configured_key_does_not_warn(caplog):
    caplog.set_level(logging.INFO)
    _, settings = prepare(["--port", "4000"], {"API_KEY": "configured"})
    assert settings.port == 4000
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert "configured" not in caplog.text
