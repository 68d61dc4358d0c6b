"""Tests for structlog configuration and PII redaction."""

import logging

from intake_router.shared.infrastructure.logging import (
    configure_logging,
    get_logger,
    privacy_redactor,
    redact_string,
)


class TestRedaction:
    def test_email_redacted(self):
        assert redact_string("contact jane.doe@example.com") == "contact [EMAIL_REDACTED]"

    def test_bearer_token_redacted(self):
        assert "abc123" not in redact_string("Authorization: Bearer abc123")

    def test_secret_assignment_redacted(self):
        assert redact_string("api_key=sk-live-42") == "api_key=[REDACTED]"

    def test_processor_redacts_nested_values(self):
        event = {
            "event": "spec_received",
            "requester": "owner@example.com",
            "personas": ["admin@example.com", "Office staff"],
            "count": 5,
        }
        redacted = privacy_redactor(None, "info", event)

        assert redacted["requester"] == "[EMAIL_REDACTED]"
        assert redacted["personas"] == ["[EMAIL_REDACTED]", "Office staff"]
        assert redacted["count"] == 5


class TestConfigureLogging:
    def test_sets_root_level_from_settings(self):
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_logger_emits(self, capsys):
        import sys

        configure_logging(stream=sys.stderr)
        get_logger("intake_router.test").warning("routing_probe", path="BUY")
        assert "routing_probe" in capsys.readouterr().err
