"""Domain enums.

Closed discriminators used by the credential engine. Each enum is matched
exhaustively at its decision points.

Available Enums:
    - AuditAction: Security events recorded by the engine
    - SecretPurpose: What a one-time secret authorizes
    - TokenType: Access vs refresh bearer tokens
    - LoginState: Outcome of a login attempt
    - RateLimitScope: What a rate limit bucket is keyed on
"""

from warden.domain.enums.audit_action import AuditAction
from warden.domain.enums.login_state import LoginState
from warden.domain.enums.rate_limit_scope import RateLimitScope
from warden.domain.enums.secret_purpose import SecretPurpose
from warden.domain.enums.token_type import TokenType

__all__ = [
    "AuditAction",
    "LoginState",
    "RateLimitScope",
    "SecretPurpose",
    "TokenType",
]
