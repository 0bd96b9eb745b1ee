"""Unit tests for SecurityAuditor and SecretDeliveryService.

Both wrap an outbound port whose failure must never change the business
outcome: a failed audit write is logged, a failed SMS is logged.
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from warden.application.dtos import RequestMetadata
from warden.application.services import SecretDeliveryService, SecurityAuditor
from warden.domain.entities.user import User
from warden.domain.enums import AuditAction, SecretPurpose
from tests.utils.fakes import FailingAuditAdapter, RecordingSmsService
from tests.utils.memory import InMemoryAuditAdapter


def make_user(phone: str | None = "+15551234567") -> User:
    now = datetime.now(UTC)
    return User(
        id=uuid7(),
        email="u@test.com",
        password_hash="$2b$04$hash",
        phone=phone,
        is_active=True,
        is_step_up_enabled=False,
        created_at=now,
        updated_at=now,
    )


@pytest.mark.unit
class TestSecurityAuditor:
    """Audit writes."""

    async def test_record_passes_metadata_and_context(self, mock_logger):
        audit = InMemoryAuditAdapter()
        auditor = SecurityAuditor(audit, mock_logger)
        user_id = uuid7()

        await auditor.record(
            AuditAction.LOGIN_FAILED,
            resource_type="session",
            success=False,
            user_id=user_id,
            metadata=RequestMetadata(ip_address="10.0.0.1", user_agent="pytest"),
            reason="invalid_password",
        )

        (event,) = audit.events
        assert event["action"] is AuditAction.LOGIN_FAILED
        assert event["success"] is False
        assert event["user_id"] == user_id
        assert event["ip_address"] == "10.0.0.1"
        assert event["user_agent"] == "pytest"
        assert event["context"] == {"reason": "invalid_password"}

    async def test_empty_context_stored_as_none(self, mock_logger):
        audit = InMemoryAuditAdapter()

        await SecurityAuditor(audit, mock_logger).record(
            AuditAction.LOGOUT, resource_type="session"
        )

        assert audit.events[0]["context"] is None
        assert audit.events[0]["ip_address"] is None

    async def test_failed_write_is_logged_not_raised(self, mock_logger):
        audit = FailingAuditAdapter()

        await SecurityAuditor(audit, mock_logger).record(
            AuditAction.USER_REGISTERED, resource_type="user"
        )

        assert len(audit.calls) == 1
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "audit_record_failed"


@pytest.mark.unit
class TestSecretDeliveryService:
    """Out-of-band delivery."""

    @pytest.mark.parametrize(
        ("purpose", "expected"),
        [
            (SecretPurpose.LOGIN_STEP_UP, "Your login OTP is: 123456"),
            (SecretPurpose.ENABLE_STEP_UP, "Your 2FA setup OTP is: 123456"),
            (SecretPurpose.PASSWORD_RESET, "Your password reset token is: 123456"),
        ],
    )
    async def test_message_per_purpose(self, mock_logger, purpose, expected):
        sms = RecordingSmsService()
        user = make_user()

        delivered = await SecretDeliveryService(sms, mock_logger).deliver(
            user, purpose, "123456"
        )

        assert delivered is True
        assert sms.outbox == [("+15551234567", expected)]

    async def test_no_phone_skips_and_never_logs_secret(self, mock_logger):
        sms = RecordingSmsService()

        delivered = await SecretDeliveryService(sms, mock_logger).deliver(
            make_user(phone=None), SecretPurpose.PASSWORD_RESET, "deadbeef"
        )

        assert delivered is False
        assert sms.outbox == []
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "secret_delivery_skipped"
        assert "deadbeef" not in repr(mock_logger.warning.call_args)

    async def test_adapter_failure_is_logged(self, mock_logger):
        sms = RecordingSmsService(deliver=False)

        delivered = await SecretDeliveryService(sms, mock_logger).deliver(
            make_user(), SecretPurpose.LOGIN_STEP_UP, "123456"
        )

        assert delivered is False
        assert mock_logger.warning.call_args.args[0] == "secret_delivery_failed"
        assert "123456" not in repr(mock_logger.warning.call_args)
