"""Machine-readable error codes for data-style errors.

Codes follow ENTITY_ACTION_REASON naming. Business rule failures of the
credential engine use plain string reasons (see
warden.domain.errors.authentication_error); these codes cover adapter
failures that are reported through Result types.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Audit trail
    AUDIT_RECORD_FAILED = "audit_record_failed"

    # Notification delivery
    NOTIFICATION_DELIVERY_FAILED = "notification_delivery_failed"

    # Persistence
    DATABASE_UNAVAILABLE = "database_unavailable"
