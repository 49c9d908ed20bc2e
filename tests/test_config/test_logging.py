"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
RedactSecretsFilter, create_json_formatter, create_text_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    RedactSecretsFilter,
    configure_logging,
    create_json_formatter,
    create_text_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.logging.filters import REDACTED


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "message", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_carries_both_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, RedactSecretsFilter) for f in handler.filters)

    def test_json_output_selects_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        configure_logging(json_output=True)
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

        configure_logging(json_output=False)
        formatter = logging.getLogger().handlers[0].formatter
        assert not isinstance(formatter, JsonFormatter)

    def test_http_client_loggers_are_quieted(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "channel-gateway"


class TestGetLogger:
    def test_same_name_returns_same_instance(self) -> None:
        logger = get_logger("same.module")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("same.module")


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestRedactSecretsFilter:
    """Testes para RedactSecretsFilter."""

    def test_masks_sensitive_extra_fields(self) -> None:
        record = _record()
        record.auth_token = "xoxb-secret"
        record.text = "olá, tudo bem?"
        record.channel_type = "SL"

        assert RedactSecretsFilter().filter(record) is True

        assert record.auth_token == REDACTED
        assert record.text == REDACTED
        assert record.channel_type == "SL"

    def test_keeps_empty_sensitive_values(self) -> None:
        record = _record()
        record.token = ""
        RedactSecretsFilter().filter(record)
        assert record.token == ""

    def test_custom_keys_are_case_insensitive(self) -> None:
        record = _record()
        record.ApiSecret = "s3cr3t"
        RedactSecretsFilter(["apisecret"]).filter(record)
        assert record.ApiSecret == REDACTED

    def test_message_is_never_touched(self) -> None:
        record = _record(msg="outbound_wired")
        RedactSecretsFilter().filter(record)
        assert record.getMessage() == "outbound_wired"


class TestFormatters:
    """Testes para create_json_formatter e create_text_formatter."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        record = _record(msg="webhook_accepted", name="test.logger")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.channel_type = "ZW"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "webhook_accepted"
        assert payload["logger"] == "test.logger"
        assert payload["level"] == "INFO"
        assert payload["correlation_id"] == "abc-123"
        assert payload["channel_type"] == "ZW"
        assert "timestamp" in payload

    def test_text_formatter_includes_correlation_id(self) -> None:
        record = _record(msg="outbound_failed", name="gateway")
        record.correlation_id = "corr-9"
        output = create_text_formatter().format(record)
        assert "[corr-9]" in output
        assert "outbound_failed" in output


class TestLoggingIntegration:
    def test_full_logging_flow_redacts_secrets(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        get_logger("integration.test").info(
            "channel_loaded", extra={"bot_token": "xoxb-123", "channel_type": "SL"}
        )

        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["service"] == "integration_test"
        assert payload["correlation_id"] == "int-test-001"
        assert payload["bot_token"] == REDACTED
        assert "xoxb-123" not in line
