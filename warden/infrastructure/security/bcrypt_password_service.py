"""Bcrypt hashing service (adapter).

Implements PasswordHashingProtocol. Used for account passwords and for
numeric one-time codes, which are short enough to need a slow hash.

Security:
    - Cost factor embedded in every digest ($2b$<cost>$...), so raising
      the configured cost never breaks verification of older digests
    - Constant-time comparison via bcrypt.checkpw
    - Malformed digests fail verification instead of raising

Performance:
    - Cost 10 = ~60ms per hash (default)
    - Each +1 doubles computation time
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt hashing service.

    Usage:
        from warden.core.container import get_password_service

        password_service = get_password_service()
        digest = password_service.hash_password("Secret123!")
        password_service.verify_password("Secret123!", digest)  # True
    """

    def __init__(self, cost_factor: int = 10) -> None:
        """Initialize bcrypt service.

        Args:
            cost_factor: Bcrypt cost factor (4-31, default 10).

        Raises:
            ValueError: If the cost factor is outside what bcrypt accepts.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext secret using bcrypt.

        Args:
            password: Plaintext secret to hash.

        Returns:
            60-character bcrypt digest. Each call uses a fresh salt.

        Raises:
            ValueError: Secret longer than 72 bytes in UTF-8. ``Password``
                rejects such values before they reach the hasher.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext secret against a bcrypt digest.

        Args:
            password: Plaintext secret to verify.
            password_hash: Stored digest.

        Returns:
            True if the secret matches, False otherwise (including
            malformed or non-bcrypt digests).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
