"""Auth service — credential checks and token issuance.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from domain.model.errors import AccountInactiveError, InvalidCredentialsError, NotFoundError
from domain.model.user import normalize_email
from port.user_repository import UserRepository
from services import token_service
from services.passwords import verify_password as _bcrypt_verify
from services.token_service import TokenConfig

logger = logging.getLogger(__name__)

TOKEN_TYPE = "Bearer"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user_id: str
    email: str
    role: str
    token_type: str = TOKEN_TYPE


def login(
    repo: UserRepository,
    email: str,
    password: str,
    config: TokenConfig,
    verify_password: Callable[[str, str], bool] = _bcrypt_verify,
) -> LoginResult:
    """Authenticate email/password and mint an access token.

    Checks run in order: account lookup, active flag, password. The first
    failing check ends the attempt.

    Raises:
        InvalidCredentialsError: unknown email or wrong password (deliberately the same)
        AccountInactiveError: account exists but is deactivated
        InfrastructureError: store failure
    """
    normalized = normalize_email(email)
    try:
        user = repo.get_by_email(normalized)
    except NotFoundError:
        logger.info("Login rejected: invalid credentials", extra={"email": normalized})
        raise InvalidCredentialsError() from None

    if not user.active:
        logger.info("Login rejected: account inactive", extra={"userId": user.id})
        raise AccountInactiveError()

    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: invalid credentials", extra={"email": normalized})
        raise InvalidCredentialsError()

    token = token_service.create_access_token(user, config)
    logger.info("User logged in", extra={"userId": user.id})
    return LoginResult(token=token, user_id=user.id, email=user.email, role=user.role.value)


def validate_token(token: str, config: TokenConfig) -> bool:
    """Stateless check of a previously issued token; never raises."""
    return token_service.validate_token(token, config)
