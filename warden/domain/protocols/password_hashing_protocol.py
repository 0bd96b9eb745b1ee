"""Password hashing protocol for domain layer.

Slow, salted, one-way hashing with a tunable work factor. Used for account
passwords and short numeric one-time codes.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Slow secret hashing interface.

    The work factor is embedded in each digest, so digests produced under
    an older factor still verify after the factor changes.

    Implementations:
        - BcryptPasswordService: bcrypt (production)
    """

    def hash_password(self, password: str) -> str:
        """Hash a secret.

        Args:
            password: Plaintext secret.

        Returns:
            Salted digest (bcrypt format).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a secret against a digest in constant time.

        Args:
            password: Plaintext secret.
            password_hash: Stored digest.

        Returns:
            True on match. False on mismatch or malformed digest (never raises).
        """
        ...
