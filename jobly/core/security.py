"""
Password hashing utilities.

Passwords are hashed using bcrypt; the cost factor comes from
settings.BCRYPT_WORK_FACTOR.
"""

import secrets
import string
from passlib.context import CryptContext
from jobly.core.config import settings

# Password hashing context (bcrypt, "$2b$" ident)
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_WORK_FACTOR,
    bcrypt__ident="2b",
)

_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def generate_random_password(length: int = 10) -> str:
    """
    Generate a random password of ASCII letters and digits.

    Characters come from the secrets module, so the result is suitable as
    an initial credential. A length of 0 gives an empty string.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))
