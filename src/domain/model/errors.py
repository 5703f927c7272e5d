"""Domain-level exceptions.

Services and repositories raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class InvalidCredentialsError(DomainError):
    """Email/password pair did not authenticate.

    Raised both for unknown emails and wrong passwords so callers cannot
    tell which accounts exist.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AccountInactiveError(DomainError):
    """Account exists but has been deactivated."""

    def __init__(self, message: str = "User account is inactive"):
        super().__init__(message)


class InfrastructureError(DomainError):
    """Backing store failed or is unreachable."""
