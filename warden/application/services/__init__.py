"""Engine services shared by the command handlers.

- OneTimeSecretService: issue/verify hashed one-time secrets
- RefreshTokenLedger: server-side state of issued refresh tokens
- TokenPairIssuer: mint access + refresh and record the refresh hash
- SecretDeliveryService: out-of-band delivery, failures logged
- SecurityAuditor: audit writes that never fail the caller
"""

from warden.application.services.one_time_secret_service import OneTimeSecretService
from warden.application.services.refresh_token_ledger import RefreshTokenLedger
from warden.application.services.secret_delivery_service import SecretDeliveryService
from warden.application.services.security_auditor import SecurityAuditor
from warden.application.services.token_pair_issuer import TokenPairIssuer

__all__ = [
    "OneTimeSecretService",
    "RefreshTokenLedger",
    "SecretDeliveryService",
    "SecurityAuditor",
    "TokenPairIssuer",
]
