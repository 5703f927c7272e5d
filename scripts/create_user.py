"""Create an account directly in MongoDB (e.g. the first ADMIN).

Usage:
    PYTHONPATH=src uv run python scripts/create_user.py admin@example.com --role ADMIN
    PYTHONPATH=src uv run python scripts/create_user.py a@x.com --first-name Ada --last-name Lovelace

The password is prompted for unless --password is given.
"""

import argparse
import getpass
import sys

from dotenv import load_dotenv

load_dotenv()

from adapter.mongodb.connection import DATABASE_NAME, get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from domain.model.errors import DomainError
from domain.model.user import Role
from services.user_service import create_user
from utils.logging import setup_structured_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a user account")
    parser.add_argument("email")
    parser.add_argument("--password", default=None, help="Prompted for if omitted")
    parser.add_argument("--first-name", default=None)
    parser.add_argument("--last-name", default=None)
    parser.add_argument("--role", choices=[r.value for r in Role], default=Role.USER.value)
    args = parser.parse_args()

    setup_structured_logging()

    password = args.password or getpass.getpass("Password: ")

    client = get_mongodb_client()
    if client is None:
        print("MongoDB unavailable (is MONGO_URL set?)", file=sys.stderr)
        return 1

    repo = MongoUserRepository(client[DATABASE_NAME])
    repo.ensure_indexes()
    try:
        user = create_user(
            repo,
            email=args.email,
            password=password,
            first_name=args.first_name,
            last_name=args.last_name,
            role=Role(args.role),
        )
    except DomainError as e:
        print(f"Failed to create user: {e}", file=sys.stderr)
        return 1

    print(f"Created {user.role.value} {user.email} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
