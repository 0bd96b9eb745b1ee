"""Out-of-band delivery of one-time secrets.

Delivery failure is never fatal: the secret is already persisted and the
user can ask for a new one. Failures are logged without the secret.
"""

from warden.domain.entities.user import User
from warden.domain.enums import SecretPurpose
from warden.domain.protocols import LoggerProtocol, NotificationProtocol

_MESSAGES = {
    SecretPurpose.LOGIN_STEP_UP: "Your login OTP is: {secret}",
    SecretPurpose.ENABLE_STEP_UP: "Your 2FA setup OTP is: {secret}",
    SecretPurpose.PASSWORD_RESET: "Your password reset token is: {secret}",
}


class SecretDeliveryService:
    """Send a freshly issued secret to the user's phone."""

    def __init__(
        self,
        notification_service: NotificationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._notification_service = notification_service
        self._logger = logger

    async def deliver(self, user: User, purpose: SecretPurpose, secret: str) -> bool:
        """Deliver a secret.

        Args:
            user: Recipient (phone on file is used as destination).
            purpose: Selects the message template.
            secret: Raw secret to embed in the message.

        Returns:
            True if the notification adapter accepted the message.
        """
        if user.phone is None:
            self._logger.warning(
                "secret_delivery_skipped",
                user_id=str(user.id),
                purpose=purpose.value,
                reason="no_phone_on_file",
            )
            return False

        delivered = await self._notification_service.send(
            user.phone, _MESSAGES[purpose].format(secret=secret)
        )
        if not delivered:
            self._logger.warning(
                "secret_delivery_failed",
                user_id=str(user.id),
                purpose=purpose.value,
            )
        return delivered
