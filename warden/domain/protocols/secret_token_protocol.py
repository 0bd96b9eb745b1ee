"""Secret token protocol.

Random secret generation plus a fast deterministic digest for
high-entropy tokens (refresh tokens, reset tokens). Such tokens need a
tamper-evident lookup key, not brute-force resistance.
"""

from typing import Protocol


class SecretTokenProtocol(Protocol):
    """Secret generation and fast digest interface.

    Implementations:
        - SecretTokenService: ``secrets`` + SHA-256 (production)
    """

    def generate_otp(self) -> str:
        """Generate a numeric one-time code.

        Returns:
            Zero-padded decimal string of the configured length.
        """
        ...

    def generate_reset_token(self) -> str:
        """Generate a high-entropy reset token.

        Returns:
            Hex string.
        """
        ...

    def hash_token(self, token: str) -> str:
        """Digest a high-entropy token.

        Args:
            token: Raw token.

        Returns:
            SHA-256 hex digest (64 characters).
        """
        ...
