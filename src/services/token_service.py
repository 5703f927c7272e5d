"""JWT access tokens: minting and verification.

Tokens are HMAC-signed (HS256 by default) and carry:
    sub     account email
    iat     issue time
    exp     iat + configured validity
    userId  account id
    role    role name
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from domain.model.user import User

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_MS = 24 * 60 * 60 * 1000
# HMAC-SHA256 keys shorter than the digest size are rejected
MIN_SECRET_BYTES = 32


@dataclass(frozen=True)
class TokenConfig:
    secret: bytes
    expiration_ms: int = DEFAULT_EXPIRATION_MS
    algorithm: str = "HS256"

    def __post_init__(self):
        if len(self.secret) < MIN_SECRET_BYTES:
            raise ValueError(f"JWT secret must be at least {MIN_SECRET_BYTES} bytes")
        if self.expiration_ms <= 0:
            raise ValueError("JWT expiration must be positive")

    @classmethod
    def from_env(cls) -> "TokenConfig":
        secret = os.getenv("JWT_SECRET")
        if not secret:
            raise ValueError(
                "JWT_SECRET environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        expiration_ms = int(os.getenv("JWT_EXPIRATION_MS", DEFAULT_EXPIRATION_MS))
        return cls(secret=secret.encode('utf-8'), expiration_ms=expiration_ms)


def create_access_token(user: User, config: TokenConfig, now: datetime | None = None) -> str:
    """Create a signed JWT access token for user."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": user.email,
        "iat": issued_at,
        "exp": issued_at + timedelta(milliseconds=config.expiration_ms),
        "userId": user.id,
        "role": user.role.value,
    }
    return jwt.encode(payload, config.secret, algorithm=config.algorithm)


def decode_token(token: str, config: TokenConfig) -> dict:
    """Verify signature, algorithm and expiry, and return the claims.

    Raises:
        JWTError: token is malformed, expired, or not signed with config.secret
    """
    return jwt.decode(token, config.secret, algorithms=[config.algorithm])


def validate_token(token: str, config: TokenConfig) -> bool:
    """Return True only for a well-formed, unexpired token signed with config.secret."""
    try:
        decode_token(token, config)
        return True
    except Exception as e:
        logger.debug(f"JWT verification failed: {e}")
        return False
