"""Testes para config.settings (base, server, whatsapp_web)."""

from __future__ import annotations

import pytest

from config.settings import BaseSettings, ServerSettings, WhatsAppWebSettings
from config.settings.base.core import _load_base_from_env, _parse_environment
from config.settings.server import DEFAULT_HTTP_PORT, DEFAULT_MAX_BODY_BYTES
from config.settings.server import _load_from_env as load_server_from_env
from config.settings.whatsapp_web import ADDRESS_SUFFIX, FILE_MIME_TYPE
from config.settings.whatsapp_web import _load_from_env as load_whatsapp_web_from_env


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("production", "production"),
            ("PROD", "production"),
            ("stage", "staging"),
            ("qualquer", "development"),
        ],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert _parse_environment(raw) == expected

    def test_defaults_are_valid(self) -> None:
        settings = BaseSettings()
        assert settings.service_name == "whatsapi"
        assert settings.is_development is True
        assert settings.strict_validation is False
        assert settings.validate() == []

    def test_invalid_log_level_reported(self) -> None:
        errors = BaseSettings(log_level="VERBOSE").validate()
        assert any("LOG_LEVEL" in error for error in errors)

    def test_production_is_strict(self) -> None:
        settings = BaseSettings(environment="production")
        assert settings.is_production is True
        assert settings.strict_validation is True

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DEBUG", "yes")
        settings = _load_base_from_env()
        assert settings.environment == "staging"
        assert settings.log_level == "DEBUG"
        assert settings.debug is True


class TestServerSettings:
    """Testes para ServerSettings."""

    def test_defaults(self) -> None:
        settings = ServerSettings()
        assert settings.port == DEFAULT_HTTP_PORT == 3000
        assert settings.max_body_bytes == DEFAULT_MAX_BODY_BYTES == 50 * 1024 * 1024
        assert settings.base_url == "http://localhost:3000"
        assert settings.docs_url == "http://localhost:3000/api-docs"
        assert settings.validate() == []

    def test_public_base_url_overrides_localhost(self) -> None:
        settings = ServerSettings(public_base_url="https://api.example.com/")
        assert settings.docs_url == "https://api.example.com/api-docs"

    def test_invalid_values_reported(self) -> None:
        errors = ServerSettings(port=0, max_body_bytes=0).validate()
        assert len(errors) == 2

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HTTP_PORT", "8080")
        monkeypatch.setenv("HTTP_MAX_BODY_BYTES", "1024")
        settings = load_server_from_env()
        assert settings.port == 8080
        assert settings.max_body_bytes == 1024


class TestWhatsAppWebSettings:
    """Testes para WhatsAppWebSettings."""

    def test_fixed_constants(self) -> None:
        assert ADDRESS_SUFFIX == "@c.us"
        assert FILE_MIME_TYPE == "application/pdf"

    def test_get_endpoint_joins_paths(self) -> None:
        settings = WhatsAppWebSettings(bridge_url="http://bridge:8081/")
        assert settings.get_endpoint("/messages") == "http://bridge:8081/messages"
        assert settings.get_endpoint("session") == "http://bridge:8081/session"

    def test_defaults_are_valid(self) -> None:
        assert WhatsAppWebSettings().validate() == []

    def test_invalid_values_reported(self) -> None:
        errors = WhatsAppWebSettings(
            bridge_url="bridge:8081",
            request_timeout_seconds=0,
            session_poll_seconds=-1,
        ).validate()
        assert len(errors) == 3
        assert any("WHATSAPP_WEB_BRIDGE_URL" in error for error in errors)

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATSAPP_WEB_BRIDGE_URL", "http://bridge:9000")
        monkeypatch.setenv("WHATSAPP_WEB_BRIDGE_TOKEN", "secret")
        monkeypatch.setenv("WHATSAPP_WEB_SESSION_MONITOR", "false")
        monkeypatch.setenv("WHATSAPP_WEB_SESSION_POLL_SECONDS", "0.5")
        settings = load_whatsapp_web_from_env()
        assert settings.bridge_url == "http://bridge:9000"
        assert settings.bridge_token == "secret"
        assert settings.session_monitor_enabled is False
        assert settings.session_poll_seconds == 0.5
