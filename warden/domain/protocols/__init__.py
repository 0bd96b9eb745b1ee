"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from warden.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from warden.domain.protocols.audit_protocol import AuditProtocol
from warden.domain.protocols.clock_protocol import ClockProtocol
from warden.domain.protocols.logger_protocol import LoggerProtocol
from warden.domain.protocols.notification_protocol import NotificationProtocol
from warden.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from warden.domain.protocols.rate_limit_protocol import RateLimitProtocol
from warden.domain.protocols.secret_token_protocol import SecretTokenProtocol
from warden.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
    TokenPayload,
)
from warden.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

# Repository protocols
from warden.domain.protocols.one_time_secret_repository import (
    OneTimeSecretData,
    OneTimeSecretRepository,
)
from warden.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from warden.domain.protocols.user_repository import UserRepository

__all__ = [
    "AuditProtocol",
    "ClockProtocol",
    "LoggerProtocol",
    "NotificationProtocol",
    "OneTimeSecretData",
    "OneTimeSecretRepository",
    "PasswordHashingProtocol",
    "RateLimitProtocol",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "SecretTokenProtocol",
    "TokenGenerationProtocol",
    "TokenPayload",
    "UnitOfWorkProtocol",
    "UserRepository",
]
