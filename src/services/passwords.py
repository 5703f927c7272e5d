"""Password hashing with bcrypt."""

import bcrypt

from domain.model.errors import ValidationError

# 2^12 iterations
BCRYPT_ROUNDS = 12
MIN_PASSWORD_LENGTH = 8
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash password using a fresh bcrypt salt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hashed password as string
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash using bcrypt's constant-time check."""
    encoded = plain_password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed_password.encode('utf-8'))


def validate_password(password: str) -> None:
    """Raise ValidationError if password cannot be accepted for a new account."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
