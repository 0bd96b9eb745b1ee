"""Security infrastructure adapters.

Exports:
    BcryptPasswordService: Slow salted hashing (passwords, one-time codes)
    JWTService: Access/refresh token minting and verification
    SecretTokenService: Secret generation and SHA-256 digests
"""

from warden.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from warden.infrastructure.security.jwt_service import JWTService
from warden.infrastructure.security.secret_token_service import SecretTokenService

__all__ = ["BcryptPasswordService", "JWTService", "SecretTokenService"]
