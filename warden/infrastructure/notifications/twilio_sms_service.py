"""Twilio SMS service (adapter).

Implements NotificationProtocol with the Twilio Messages REST API.

API:
    POST https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json
    Basic auth (account SID, auth token), form body To/From/Body

Delivery failures (timeouts, connection errors, non-2xx responses) are
logged and reported as False. They never raise.
"""

import httpx

from warden.domain.protocols.logger_protocol import LoggerProtocol
from warden.infrastructure.notifications.stub_sms_service import mask_destination

TWILIO_API_BASE_URL = "https://api.twilio.com/2010-04-01"


class TwilioSmsService:
    """SMS delivery through Twilio.

    Thread-safe: uses an httpx.AsyncClient per request (no shared state).
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        logger: LoggerProtocol,
        *,
        timeout: float = 10.0,
        base_url: str = TWILIO_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Twilio adapter.

        Args:
            account_sid: Twilio account SID.
            auth_token: Twilio auth token.
            from_number: Sender number (E.164).
            logger: Structured logger.
            timeout: Request timeout in seconds.
            base_url: API base URL.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._account_sid = account_sid
        self._auth_token = auth_token
        self._from_number = from_number
        self._logger = logger
        self._timeout = timeout
        self._messages_url = f"{base_url}/Accounts/{account_sid}/Messages.json"
        self._transport = transport

    async def send(self, destination: str, message: str) -> bool:
        """Send an SMS.

        Args:
            destination: Recipient number (E.164).
            message: Message body.

        Returns:
            True if Twilio accepted the message, False otherwise.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._messages_url,
                    auth=(self._account_sid, self._auth_token),
                    data={
                        "To": destination,
                        "From": self._from_number,
                        "Body": message,
                    },
                )
        except httpx.TimeoutException as e:
            self._logger.warning(
                "twilio_sms_timeout",
                destination=mask_destination(destination),
                error=str(e),
            )
            return False
        except httpx.RequestError as e:
            self._logger.warning(
                "twilio_sms_connection_error",
                destination=mask_destination(destination),
                error=str(e),
            )
            return False

        if response.is_success:
            self._logger.info(
                "twilio_sms_sent", destination=mask_destination(destination)
            )
            return True

        self._logger.warning(
            "twilio_sms_rejected",
            destination=mask_destination(destination),
            status_code=response.status_code,
        )
        return False
