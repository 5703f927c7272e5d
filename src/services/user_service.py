"""User account lifecycle — creation and lookup.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from typing import Callable

from domain.model.user import DEFAULT_ROLE, Role, User, normalize_email
from port.user_repository import UserRepository
from services.passwords import hash_password as _bcrypt_hash, validate_password

logger = logging.getLogger(__name__)


def create_user(
    repo: UserRepository,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
    role: Role | None = None,
    hash_password: Callable[[str], str] = _bcrypt_hash,
) -> User:
    """Create a new active account.

    The email is normalized before storage and role defaults to USER.
    Uniqueness is left to the repository's atomic insert rather than
    checked here first.

    Raises:
        ValidationError: password does not meet requirements
        DuplicateError: email already registered
        InfrastructureError: store failure
    """
    validate_password(password)
    user = repo.create(
        email=normalize_email(email),
        password_hash=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        role=role or DEFAULT_ROLE,
    )
    logger.info("User registered", extra={"userId": user.id, "role": user.role.value})
    return user


def get_user_by_id(repo: UserRepository, user_id: str) -> User:
    """Raises NotFoundError if absent."""
    return repo.get_by_id(user_id)


def get_user_by_email(repo: UserRepository, email: str) -> User:
    """Raises NotFoundError if absent."""
    return repo.get_by_email(normalize_email(email))


def email_exists(repo: UserRepository, email: str) -> bool:
    return repo.exists_by_email(normalize_email(email))


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()
