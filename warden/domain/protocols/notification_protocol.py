"""Notification delivery protocol.

Out-of-band delivery of one-time codes and reset links. The engine treats
a failed delivery as non-fatal: the secret stays persisted and the failure
is logged.
"""

from typing import Protocol


class NotificationProtocol(Protocol):
    """Out-of-band message delivery interface.

    Implementations:
        - StubSmsService: logs the message (development/testing)
        - TwilioSmsService: Twilio Messages API (production)
    """

    async def send(self, destination: str, message: str) -> bool:
        """Deliver a message.

        Args:
            destination: Phone number (E.164) or address.
            message: Message body.

        Returns:
            True if the provider accepted the message, False otherwise.
            Implementations MUST NOT raise on delivery failure.
        """
        ...
