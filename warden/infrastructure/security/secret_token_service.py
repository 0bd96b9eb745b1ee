"""Secret generation and fast digest service (adapter).

Implements SecretTokenProtocol.

Secrets:
    - One-time codes: N random decimal digits (``secrets.randbelow``)
    - Reset tokens: 32 random bytes as 64 hex characters

Digest:
    - SHA-256 hex for high-entropy tokens (refresh tokens, reset tokens).
      Deterministic, so the digest doubles as the lookup key.
"""

import hashlib
import secrets


class SecretTokenService:
    """Generate one-time secrets and digest high-entropy tokens.

    Usage:
        service = SecretTokenService(otp_length=6)
        code = service.generate_otp()            # "042917"
        token = service.generate_reset_token()   # 64 hex chars
        digest = service.hash_token(token)       # 64 hex chars
    """

    RESET_TOKEN_BYTES = 32

    def __init__(self, otp_length: int = 6) -> None:
        """Initialize service.

        Args:
            otp_length: Digits per one-time code.
        """
        if otp_length < 4:
            msg = "One-time codes must have at least 4 digits"
            raise ValueError(msg)
        self._otp_length = otp_length

    def generate_otp(self) -> str:
        """Generate a zero-padded numeric code.

        Returns:
            Code string of exactly ``otp_length`` digits.
        """
        return str(secrets.randbelow(10**self._otp_length)).zfill(self._otp_length)

    def generate_reset_token(self) -> str:
        """Generate a password reset token.

        Returns:
            64-character hex string (256 bits of entropy).
        """
        return secrets.token_hex(self.RESET_TOKEN_BYTES)

    def hash_token(self, token: str) -> str:
        """SHA-256 digest of a token.

        Args:
            token: Raw token.

        Returns:
            64-character lowercase hex digest.
        """
        return hashlib.sha256(token.encode("utf-8")).hexdigest()
