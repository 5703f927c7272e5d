"""MongoDB index management.

Repositories declare their indexes as IndexSpec values; apply_indexes makes the
collection match them, replacing any index that shares a name or key pattern
but differs from the declaration.
"""

from dataclasses import dataclass, field
from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


@dataclass(frozen=True)
class IndexSpec:
    name: str
    keys: list[tuple[str, int]]
    options: dict = field(default_factory=dict)


def _matches(spec: IndexSpec, info: dict) -> bool:
    if list(info.get('key', [])) != spec.keys:
        return False
    return all(info.get(opt) == value for opt, value in spec.options.items())


def _drop_conflicts(collection, spec: IndexSpec) -> bool:
    """Drop indexes clashing with spec. Return True if spec already exists as declared."""
    for idx_name, info in collection.index_information().items():
        if idx_name == '_id_':
            continue
        same_name = idx_name == spec.name
        same_keys = list(info.get('key', [])) == spec.keys
        if same_name and _matches(spec, info):
            return True
        if same_name or same_keys:
            logger.warning("Dropping conflicting index", extra={"index": idx_name, "wanted": spec.name})
            collection.drop_index(idx_name)
    return False


def apply_indexes(collection, specs: list[IndexSpec]) -> bool:
    """Create every declared index. Return False if any could not be created."""
    ok = True
    for spec in specs:
        try:
            if _drop_conflicts(collection, spec):
                continue
            collection.create_index(spec.keys, name=spec.name, **spec.options)
            logger.info("Created index", extra={"index": spec.name})
        except PyMongoError as e:
            logger.error("Failed to create index", extra={"index": spec.name, "error": str(e)})
            ok = False
    return ok


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
