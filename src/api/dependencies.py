from functools import lru_cache

from fastapi import HTTPException

from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.user_repository import MongoUserRepository
from port.user_repository import UserRepository
from services.token_service import TokenConfig


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


@lru_cache
def get_token_config() -> TokenConfig:
    """Signing settings from JWT_SECRET / JWT_EXPIRATION_MS, read once."""
    return TokenConfig.from_env()
