"""Bearer token kinds.

The value is embedded in every minted token as the ``type`` claim and
checked on verification, so an access token is never accepted where a
refresh token is required (and vice versa).
"""

from enum import Enum


class TokenType(str, Enum):
    """Bearer token kinds."""

    ACCESS = "access"
    REFRESH = "refresh"
