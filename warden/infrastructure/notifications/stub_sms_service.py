"""Stub SMS service (adapter).

Implements NotificationProtocol by writing the message to the structured
log instead of sending it. Lets developers read one-time codes locally.
"""

from warden.domain.protocols.logger_protocol import LoggerProtocol


def mask_destination(destination: str) -> str:
    """Mask all but the last four characters of a destination.

    Example:
        >>> mask_destination("+15551234567")
        '********4567'
    """
    if len(destination) <= 4:
        return "*" * len(destination)
    return "*" * (len(destination) - 4) + destination[-4:]


class StubSmsService:
    """Log-only SMS delivery.

    Messages carry one-time codes, so the body is only logged when
    ``reveal_messages`` is True (development).
    """

    def __init__(self, logger: LoggerProtocol, *, reveal_messages: bool = False) -> None:
        """Initialize stub.

        Args:
            logger: Structured logger.
            reveal_messages: Log destination and body in clear (development only).
        """
        self._logger = logger
        self._reveal_messages = reveal_messages

    async def send(self, destination: str, message: str) -> bool:
        """Log the message and report it delivered.

        Args:
            destination: Phone number.
            message: Message body.

        Returns:
            Always True.
        """
        if self._reveal_messages:
            self._logger.info(
                "sms_stub_delivered", destination=destination, message=message
            )
        else:
            self._logger.info(
                "sms_stub_delivered",
                destination=mask_destination(destination),
                message_length=len(message),
            )
        return True
