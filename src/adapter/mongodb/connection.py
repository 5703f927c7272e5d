import os
import logging
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# PyMongo logs every heartbeat and pool event at INFO; keep only warnings
logging.getLogger('pymongo').setLevel(logging.WARNING)

# Connection string and database name from environment
MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'accounts')
USERS_COLLECTION_NAME = 'users'

CLIENT_OPTIONS = {
    'serverSelectionTimeoutMS': 5000,  # fail fast when no server is reachable
    'connectTimeoutMS': 5000,
    'socketTimeoutMS': 30000,          # upper bound for a single operation
    'maxPoolSize': 10,
    'minPoolSize': 0,                  # no idle connections kept open
    'maxIdleTimeMS': 30000,
    'waitQueueTimeoutMS': 10000,       # wait for a free pooled connection
    'retryWrites': True,               # one retry on transient network errors
    'retryReads': True,
    'tz_aware': True,                  # created_at/updated_at come back as aware UTC datetimes
}

_client_cache = None
_connection_attempted = False
_connection_failed = False


def get_mongodb_client() -> MongoClient | None:
    """Get MongoDB client with connection caching and reconnection logic.

    Connection strategy:
    1. Return cached client if healthy (ping succeeds)
    2. If cached client fails, attempt reconnection
    3. If initial connection failed (config issue), don't retry

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache, _connection_attempted, _connection_failed

    # Reuse the cached client while it still answers ping
    if _client_cache:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

    # A failed first attempt means bad configuration; retrying won't help
    if _connection_failed:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured; set it in the environment or .env")
        _connection_failed = True
        return None

    try:
        client = MongoClient(MONGO_URL, **CLIENT_OPTIONS)
        client.admin.command('ping')  # MongoClient connects lazily; force a round trip

        is_first_connection = not _connection_attempted
        _connection_attempted = True
        _client_cache = client

        # Log only on first connection, not on every reconnect
        if is_first_connection:
            logger.info(f"[MONGODB] Connected successfully to {DATABASE_NAME}")

        return client
    except (ConnectionFailure, PyMongoError) as e:
        # Only the initial failure is logged and marks the config as broken
        if not _connection_attempted:
            logger.error(f"[MONGODB] Initial connection failed: {str(e)[:200]}")
            _connection_failed = True
        return None
