# domain/model/user.py

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Closed set of account roles carried in the token `role` claim."""
    USER = 'USER'
    ADMIN = 'ADMIN'
    MODERATOR = 'MODERATOR'


DEFAULT_ROLE = Role.USER


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup (emails are case-insensitive)."""
    return email.strip().lower()


@dataclass
class User:
    """Domain model representing a user account."""
    id: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime
    updated_at: datetime
    first_name: str | None = None
    last_name: str | None = None
    role: Role = DEFAULT_ROLE
    active: bool = True

    def to_public(self) -> dict:
        """Return the account fields that may leave the service (no password hash)."""
        data = asdict(self)
        data.pop('password_hash')
        return data
