from typing import Protocol

from domain.model.user import Role, User


class UserRepository(Protocol):
    """Protocol defining the interface for user account storage.

    Implementations raise domain errors instead of returning sentinels:
    NotFoundError for lookup misses, DuplicateError when the email is taken,
    InfrastructureError when the backend fails.
    """
    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str | None,
        last_name: str | None,
        role: Role,
    ) -> User:
        """Insert a new active user. Uniqueness check and insert are one atomic step."""
        ...

    def get_by_id(self, user_id: str) -> User:
        """Find a user by ID. Raise NotFoundError if absent."""
        ...

    def get_by_email(self, email: str) -> User:
        """Find a user by (normalized) email. Raise NotFoundError if absent."""
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if an account with this email exists."""
        ...

    def list_all(self) -> list[User]:
        """Return every user, oldest first."""
        ...
