"""Credential engine error constants.

Business failures are returned as ``Failure(error=<constant>)`` and never
raised. The presentation layer maps each constant to an HTTP status and an
RFC 9457 body.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Persistence faults are NOT represented here; they propagate as
      exceptions and are reported as service unavailability

Usage:
    from warden.domain.errors import AuthenticationError

    match result:
        case Failure(error=AuthenticationError.INVALID_CREDENTIALS):
            ...
"""


class AuthenticationError:
    """Errors surfaced by credential engine operations.

    INVALID_CREDENTIALS is returned for both unknown email and wrong
    password so callers cannot enumerate accounts.
    """

    EMAIL_ALREADY_EXISTS = "email_already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_INACTIVE = "account_inactive"
    PHONE_REQUIRED = "phone_required"
    STEP_UP_ALREADY_ENABLED = "step_up_already_enabled"
    SECRET_NOT_FOUND = "secret_not_found"
    ATTEMPTS_EXCEEDED = "attempts_exceeded"
    INVALID_SECRET = "invalid_secret"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
    USER_NOT_FOUND = "user_not_found"
    UNSUPPORTED_PURPOSE = "unsupported_purpose"


class OneTimeSecretError:
    """Failure kinds of one-time secret verification.

    Values are shared with AuthenticationError so store failures surface
    unchanged through the engine.
    """

    NOT_FOUND = AuthenticationError.SECRET_NOT_FOUND
    ATTEMPTS_EXCEEDED = AuthenticationError.ATTEMPTS_EXCEEDED
    INVALID_SECRET = AuthenticationError.INVALID_SECRET


class TokenError:
    """Failure kinds of bearer token verification."""

    INVALID_TOKEN = "token_invalid"
    EXPIRED_TOKEN = "token_expired"
    WRONG_TOKEN_TYPE = "token_wrong_type"
    MALFORMED_PAYLOAD = "token_malformed_payload"


class LedgerError:
    """Failure kinds of refresh token ledger checks."""

    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_REVOKED = "token_revoked"
    TOKEN_EXPIRED = "token_expired"
