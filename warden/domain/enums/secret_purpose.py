"""One-time secret purposes.

A one-time secret is only ever verified against the purpose it was issued
for; a login code cannot enable step-up and vice versa.
"""

from enum import Enum


class SecretPurpose(str, Enum):
    """What a one-time secret authorizes.

    - LOGIN_STEP_UP: second factor for a pending login (6-digit code)
    - ENABLE_STEP_UP: confirms phone ownership when enabling step-up (6-digit code)
    - PASSWORD_RESET: authorizes a password change (high-entropy token)
    """

    LOGIN_STEP_UP = "login_2fa"
    ENABLE_STEP_UP = "enable_2fa"
    PASSWORD_RESET = "forgot_password"

    @property
    def is_numeric_code(self) -> bool:
        """True for purposes that use short numeric codes."""
        match self:
            case SecretPurpose.LOGIN_STEP_UP | SecretPurpose.ENABLE_STEP_UP:
                return True
            case SecretPurpose.PASSWORD_RESET:
                return False
