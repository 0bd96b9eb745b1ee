"""Login attempt outcomes.

State machine per login attempt:

    ANONYMOUS -> AUTHENTICATING -> AUTHENTICATED_DIRECT
                                -> STEP_UP_PENDING -> AUTHENTICATED_WITH_SESSION
                                -> REJECTED

Only the states a caller can observe in a response are modelled here;
ANONYMOUS and AUTHENTICATING exist only inside a handler call and
REJECTED is expressed as Failure.
"""

from enum import Enum


class LoginState(str, Enum):
    """Observable login outcomes."""

    AUTHENTICATED_DIRECT = "authenticated"
    STEP_UP_PENDING = "step_up_pending"
    AUTHENTICATED_WITH_SESSION = "authenticated_with_step_up"
