"""Notification delivery adapters.

- StubSmsService: logs messages (development/testing)
- TwilioSmsService: Twilio Messages API over httpx (production)
"""

from warden.infrastructure.notifications.stub_sms_service import (
    StubSmsService,
    mask_destination,
)
from warden.infrastructure.notifications.twilio_sms_service import TwilioSmsService

__all__ = ["StubSmsService", "TwilioSmsService", "mask_destination"]
