"""Unit tests for the structlog console adapter."""

import json

import pytest
import structlog

from warden.infrastructure.logging.console_adapter import ConsoleAdapter, redact_secrets


@pytest.fixture(autouse=True)
def restore_structlog_config():
    """ConsoleAdapter configures structlog globally against the captured stdout."""
    saved = structlog.get_config()
    yield
    structlog.configure(**saved)


def last_json_line(capsys) -> dict:
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    return json.loads(lines[-1])


@pytest.mark.unit
class TestRedactSecrets:
    def test_secret_keys_masked(self):
        event = redact_secrets(
            None,
            "info",
            {"event": "x", "password": "Secret123!", "code": "123456", "user_id": "u1"},
        )

        assert event["password"] == "[REDACTED]"
        assert event["code"] == "[REDACTED]"
        assert event["user_id"] == "u1"

    def test_event_without_secrets_unchanged(self):
        event = {"event": "login_succeeded", "user_id": "u1"}

        assert redact_secrets(None, "info", dict(event)) == event


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_includes_level_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.info("session_created", user_id="u1")

        line = last_json_line(capsys)
        assert line["event"] == "session_created"
        assert line["level"] == "info"
        assert line["user_id"] == "u1"
        assert "timestamp" in line

    def test_refresh_token_never_rendered(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.warning("suspicious_refresh", refresh_token="eyJhbGciOi...")

        out = capsys.readouterr().out
        assert "eyJhbGciOi" not in out
        assert "[REDACTED]" in out

    def test_error_expands_exception(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("infrastructure_failure", error=TimeoutError("pool exhausted"))

        line = last_json_line(capsys)
        assert line["error_type"] == "TimeoutError"
        assert line["error_message"] == "pool exhausted"

    def test_bind_adds_context(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(component="sms")

        logger.info("secret_delivery_skipped")

        assert last_json_line(capsys)["component"] == "sms"

    def test_level_filters_lower_events(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("ignored")

        assert capsys.readouterr().out == ""
