"""One-time secret store.

Issues and verifies single-use secrets on top of OneTimeSecretRepository.

Hashing by purpose:
    - Step-up codes (6 digits, low entropy): bcrypt, attempt-limited
    - Reset tokens (256 bits): SHA-256, looked up directly by digest

Verification rules:
    1. Newest unused, unexpired row for (user, purpose), locked until the
       transaction ends, else NOT_FOUND
    2. attempts >= max_attempts -> ATTEMPTS_EXCEEDED (counter untouched)
    3. Mismatch -> atomic increment, INVALID_SECRET
    4. Match -> conditional mark-used; losing a concurrent race -> NOT_FOUND
"""

import hmac
from datetime import timedelta
from uuid import UUID

from warden.core.result import Failure, Result, Success
from warden.domain.enums import SecretPurpose
from warden.domain.errors import OneTimeSecretError
from warden.domain.protocols import (
    ClockProtocol,
    OneTimeSecretData,
    OneTimeSecretRepository,
    PasswordHashingProtocol,
    SecretTokenProtocol,
)


class OneTimeSecretService:
    """Issue and consume one-time secrets.

    The raw secret is returned to the caller for out-of-band delivery and
    is never stored or sent by this service.
    """

    def __init__(
        self,
        secret_repo: OneTimeSecretRepository,
        password_service: PasswordHashingProtocol,
        secret_token_service: SecretTokenProtocol,
        clock: ClockProtocol,
        *,
        max_attempts: int = 3,
        otp_ttl: timedelta = timedelta(minutes=10),
        reset_ttl: timedelta = timedelta(hours=1),
    ) -> None:
        """Initialize the store.

        Args:
            secret_repo: Persistence for hashed secrets.
            password_service: Slow hasher used for numeric codes.
            secret_token_service: Secret generation and SHA-256 digests.
            clock: Time source for expiry.
            max_attempts: Failed verifications allowed per secret.
            otp_ttl: Default lifetime of numeric codes.
            reset_ttl: Default lifetime of reset tokens.
        """
        self._secret_repo = secret_repo
        self._password_service = password_service
        self._secret_token_service = secret_token_service
        self._clock = clock
        self._max_attempts = max_attempts
        self._otp_ttl = otp_ttl
        self._reset_ttl = reset_ttl

    async def issue(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        ttl: timedelta | None = None,
    ) -> str:
        """Create and persist a new secret.

        Args:
            user_id: Owner of the secret.
            purpose: What the secret authorizes.
            ttl: Lifetime override; purpose default when None.

        Returns:
            The raw secret (code or token) for delivery.
        """
        match purpose:
            case SecretPurpose.LOGIN_STEP_UP | SecretPurpose.ENABLE_STEP_UP:
                raw_secret = self._secret_token_service.generate_otp()
                secret_hash = self._password_service.hash_password(raw_secret)
                default_ttl = self._otp_ttl
            case SecretPurpose.PASSWORD_RESET:
                raw_secret = self._secret_token_service.generate_reset_token()
                secret_hash = self._secret_token_service.hash_token(raw_secret)
                default_ttl = self._reset_ttl

        await self._secret_repo.save(
            user_id=user_id,
            purpose=purpose,
            secret_hash=secret_hash,
            expires_at=self._clock.now() + (ttl or default_ttl),
        )
        return raw_secret

    async def verify(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        presented: str,
    ) -> Result[OneTimeSecretData, str]:
        """Verify and consume the current secret for (user, purpose).

        Args:
            user_id: Owner of the secret.
            purpose: Purpose the secret must have been issued for.
            presented: Secret as presented by the user.

        Returns:
            Success(OneTimeSecretData) with the consumed row.
            Failure(OneTimeSecretError.*) otherwise.
        """
        now = self._clock.now()
        secret = await self._secret_repo.find_latest_active(
            user_id, purpose, now, for_update=True
        )
        if secret is None:
            return Failure(error=OneTimeSecretError.NOT_FOUND)

        if secret.attempts >= self._max_attempts:
            return Failure(error=OneTimeSecretError.ATTEMPTS_EXCEEDED)

        if not self._matches(purpose, presented, secret.secret_hash):
            await self._secret_repo.increment_attempts(secret.id)
            return Failure(error=OneTimeSecretError.INVALID_SECRET)

        if not await self._secret_repo.mark_used(secret.id, now):
            return Failure(error=OneTimeSecretError.NOT_FOUND)

        return Success(value=secret)

    async def find_reset_token(self, raw_token: str) -> OneTimeSecretData | None:
        """Look up an effective reset token by its digest.

        No attempt counting: reset tokens are not guessable.

        Args:
            raw_token: Token as delivered to the user.

        Returns:
            The matching unused, unexpired row, or None.
        """
        return await self._secret_repo.find_active_by_hash(
            self._secret_token_service.hash_token(raw_token),
            SecretPurpose.PASSWORD_RESET,
            self._clock.now(),
        )

    async def consume(self, secret_id: UUID) -> bool:
        """Mark a secret used.

        Returns:
            True if this call consumed it, False if it was already used.
        """
        return await self._secret_repo.mark_used(secret_id, self._clock.now())

    def _matches(self, purpose: SecretPurpose, presented: str, secret_hash: str) -> bool:
        if purpose.is_numeric_code:
            return self._password_service.verify_password(presented, secret_hash)
        return hmac.compare_digest(
            self._secret_token_service.hash_token(presented), secret_hash
        )
