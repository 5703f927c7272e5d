"""In-memory implementation of UserRepository for testing."""

import threading
import uuid
from datetime import datetime, timezone

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import DEFAULT_ROLE, Role, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: Role = DEFAULT_ROLE,
    ) -> User:
        with self._lock:
            if any(u.email == email for u in self.store.values()):
                raise DuplicateError(f"User with email {email} already exists")

            now = datetime.now(timezone.utc)
            user = User(
                id=uuid.uuid4().hex,
                email=email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
                first_name=first_name,
                last_name=last_name,
                role=role,
                active=True,
            )
            self.store[user.id] = user
            return user

    def set_active(self, user_id: str, active: bool) -> None:
        """Test helper: flip the active flag (no public update path exists)."""
        user = self.get_by_id(user_id)
        user.active = active
        user.updated_at = datetime.now(timezone.utc)

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: str) -> User:
        user = self.store.get(user_id)
        if user is None:
            raise NotFoundError(f"User not found with id: {user_id}")
        return user

    def get_by_email(self, email: str) -> User:
        for user in self.store.values():
            if user.email == email:
                return user
        raise NotFoundError(f"User not found with email: {email}")

    def exists_by_email(self, email: str) -> bool:
        return any(u.email == email for u in self.store.values())

    def list_all(self) -> list[User]:
        return sorted(self.store.values(), key=lambda u: u.created_at)
