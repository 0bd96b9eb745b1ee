"""Field validators shared by commands and request schemas.

Each takes the raw string, returns the normalized value and raises
``ValueError`` with a user-facing message when the value is unacceptable.
"""

import re

_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_E164 = re.compile(r"^\+[1-9]\d{7,14}$")
_PHONE_PUNCTUATION = re.compile(r"[\s\-()]")
_DIGITS = re.compile(r"^\d{4,10}$")
_HEX = re.compile(r"^[a-fA-F0-9]+$")

MIN_PASSWORD_LENGTH = 8
# bcrypt only reads the first 72 bytes and bcrypt 5 rejects longer input
MAX_PASSWORD_BYTES = 72
_SPECIAL_CHARACTERS = frozenset('!@#$%^&*(),.?":{}|<>')
_PASSWORD_RULES = (
    (str.isupper, "Password must contain an uppercase letter"),
    (str.islower, "Password must contain a lowercase letter"),
    (str.isdigit, "Password must contain a digit"),
    (_SPECIAL_CHARACTERS.__contains__, "Password must contain a special character"),
)


def validate_email(v: str) -> str:
    """Lower-case and strip ``v``.

    >>> validate_email(" User@Example.COM")
    'user@example.com'
    """
    v = v.strip()
    if not _EMAIL.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Require 8+ characters, at most 72 UTF-8 bytes and one character from
    each class in ``_PASSWORD_RULES``.
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    for matches, message in _PASSWORD_RULES:
        if not any(matches(c) for c in v):
            raise ValueError(message)
    return v


def validate_phone(v: str) -> str:
    """Drop spaces, dashes and parentheses, then require E.164.

    >>> validate_phone("+1 (555) 123-4567")
    '+15551234567'
    """
    normalized = _PHONE_PUNCTUATION.sub("", v)
    if not _E164.match(normalized):
        raise ValueError("Phone number must be in E.164 format (e.g. +15551234567)")
    return normalized


def validate_otp_code(v: str) -> str:
    if not _DIGITS.match(v):
        raise ValueError("Code must be 4 to 10 digits")
    return v


def validate_token_format(v: str) -> str:
    if not _HEX.match(v):
        raise ValueError("Token must be a hexadecimal string")
    return v
