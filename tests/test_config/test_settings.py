"""Testes para config.settings (gateway, backend e canais)."""

from __future__ import annotations

import pytest

from config.settings import (
    FRESHCHAT_API_URL,
    SLACK_API_URL,
    BackendSettings,
    FreshChatSettings,
    GatewaySettings,
    SlackSettings,
    ZenviaSettings,
    get_backend_settings,
    get_gateway_settings,
    get_slack_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_gateway_settings.cache_clear()
    get_backend_settings.cache_clear()
    get_slack_settings.cache_clear()
    yield
    get_gateway_settings.cache_clear()
    get_backend_settings.cache_clear()
    get_slack_settings.cache_clear()


class TestGatewaySettings:
    def test_defaults_are_valid(self) -> None:
        settings = GatewaySettings()
        assert settings.validate() == []
        assert settings.is_development
        assert settings.send_policy == "abort_on_first_failure"

    def test_invalid_values_are_reported(self) -> None:
        settings = GatewaySettings(
            log_level="VERBOSE",
            http_timeout_seconds=0,
            channels_file="",
            send_policy="retry_forever",
        )
        errors = settings.validate()
        assert any("LOG_LEVEL" in e for e in errors)
        assert any("HTTP_TIMEOUT_SECONDS" in e for e in errors)
        assert any("CHANNELS_FILE" in e for e in errors)
        assert any("SEND_POLICY" in e for e in errors)

    def test_signature_bypass_only_in_development(self) -> None:
        assert GatewaySettings(validate_signatures=False).validate() == []
        errors = GatewaySettings(environment="production", validate_signatures=False).validate()
        assert any("VALIDATE_SIGNATURES" in e for e in errors)

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "not-a-number")
        monkeypatch.setenv("SEND_POLICY", "BEST_EFFORT")
        monkeypatch.setenv("VALIDATE_SIGNATURES", "0")

        settings = get_gateway_settings()

        assert settings.is_production
        assert settings.log_level == "DEBUG"
        assert settings.http_timeout_seconds == 30.0
        assert settings.send_policy == "best_effort"
        assert settings.validate_signatures is False

    def test_getter_is_cached(self) -> None:
        assert get_gateway_settings() is get_gateway_settings()


class TestBackendSettings:
    def test_memory_allowed_in_development(self) -> None:
        assert BackendSettings().validate(GatewaySettings()) == []

    def test_memory_forbidden_in_production(self) -> None:
        errors = BackendSettings().validate(GatewaySettings(environment="production"))
        assert any("BACKEND=memory" in e for e in errors)

    def test_redis_requires_url(self) -> None:
        errors = BackendSettings(kind="redis").validate(GatewaySettings())
        assert any("REDIS_URL" in e for e in errors)

        base = GatewaySettings(redis_url="redis://localhost:6379/0")
        assert BackendSettings(kind="redis").validate(base) == []

    def test_non_positive_ttl(self) -> None:
        errors = BackendSettings(status_ttl_seconds=0).validate(GatewaySettings())
        assert any("STATUS_TTL_SECONDS" in e for e in errors)

    def test_unknown_kind_falls_back_to_memory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BACKEND", "cassandra")
        assert get_backend_settings().kind == "memory"


class TestChannelSettings:
    def test_defaults_use_public_endpoints(self) -> None:
        assert FreshChatSettings().api_url == FRESHCHAT_API_URL
        assert SlackSettings().api_url == SLACK_API_URL
        assert FreshChatSettings().validate() == []
        assert ZenviaSettings().validate() == []

    def test_plain_http_endpoints_are_rejected(self) -> None:
        assert SlackSettings(api_url="http://slack.local/api").validate()
        errors = ZenviaSettings(
            sms_send_url="http://sms.local", whatsapp_send_url="http://wa.local"
        ).validate()
        assert len(errors) == 2

    def test_slack_url_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_API_URL", "https://slack.test/api")
        assert get_slack_settings().api_url == "https://slack.test/api"
