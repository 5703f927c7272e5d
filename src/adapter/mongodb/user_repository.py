"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from adapter.mongodb.indexes import IndexSpec, apply_indexes
from domain.model.errors import DuplicateError, InfrastructureError, NotFoundError
from domain.model.user import DEFAULT_ROLE, Role, User

logger = getLogger(__name__)

def _bson_now() -> datetime:
    """Current UTC time at BSON datetime precision (milliseconds)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


USER_INDEXES = [
    # email uniqueness is enforced here, not by a find-then-insert in the service
    IndexSpec('idx_users_email', [('email', ASCENDING)], {'unique': True}),
    IndexSpec('idx_users_created_at', [('created_at', ASCENDING)]),
]


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        return apply_indexes(self.collection, USER_INDEXES)

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            first_name=doc.get('first_name'),
            last_name=doc.get('last_name'),
            role=Role(doc.get('role', DEFAULT_ROLE.value)),
            active=doc.get('active', True),
        )

    def _find_one(self, query: dict, what: str) -> User:
        try:
            doc = self.collection.find_one(query)
        except PyMongoError as e:
            logger.error("Failed to get user", extra={"query": what, "error": str(e)})
            raise InfrastructureError("User store unavailable") from e
        if doc is None:
            raise NotFoundError(f"User not found with {what}")
        return self._to_domain(doc)

    def create(
        self,
        email: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: Role = DEFAULT_ROLE,
    ) -> User:
        """Insert a new user; the unique email index rejects duplicates atomically."""
        user_id = uuid.uuid4().hex
        now = _bson_now()
        user_doc = {
            '_id': user_id,
            'email': email,
            'password_hash': password_hash,
            'first_name': first_name,
            'last_name': last_name,
            'role': role.value,
            'active': True,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateError(f"User with email {email} already exists") from e
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise InfrastructureError("Failed to create user") from e

        return self._to_domain(user_doc)

    def get_by_id(self, user_id: str) -> User:
        return self._find_one({'_id': user_id}, f"id: {user_id}")

    def get_by_email(self, email: str) -> User:
        return self._find_one({'email': email}, f"email: {email}")

    def exists_by_email(self, email: str) -> bool:
        try:
            return self.collection.count_documents({'email': email}, limit=1) > 0
        except PyMongoError as e:
            logger.error("Failed to check user email", extra={"email": email, "error": str(e)})
            raise InfrastructureError("User store unavailable") from e

    def list_all(self) -> list[User]:
        try:
            docs = list(self.collection.find().sort('created_at', ASCENDING))
        except PyMongoError as e:
            logger.error("Failed to list users", extra={"error": str(e)})
            raise InfrastructureError("User store unavailable") from e
        return [self._to_domain(doc) for doc in docs]
