"""Account routes (register, lookup, list)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import CreateUserRequest, UserResponse
from domain.model.errors import DuplicateError, InfrastructureError, NotFoundError, ValidationError
from port.user_repository import UserRepository
from services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


def _store_unavailable(e: InfrastructureError) -> HTTPException:
    logger.error("User store failure", extra={"error": str(e)})
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: CreateUserRequest, repo: UserRepository = Depends(get_user_repo)):
    """Create a new account.

    Raises:
        HTTPException: 409 if email already exists, 400 if the password is rejected
    """
    try:
        user = user_service.create_user(
            repo,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
        )
    except DuplicateError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InfrastructureError as e:
        raise _store_unavailable(e)

    return UserResponse.from_domain(user)


@router.get("", response_model=list[UserResponse])
async def list_users(repo: UserRepository = Depends(get_user_repo)):
    try:
        users = user_service.list_users(repo)
    except InfrastructureError as e:
        raise _store_unavailable(e)
    return [UserResponse.from_domain(u) for u in users]


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(email: str, repo: UserRepository = Depends(get_user_repo)):
    try:
        user = user_service.get_user_by_email(repo, email)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except InfrastructureError as e:
        raise _store_unavailable(e)
    return UserResponse.from_domain(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repo)):
    try:
        user = user_service.get_user_by_id(repo, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except InfrastructureError as e:
        raise _store_unavailable(e)
    return UserResponse.from_domain(user)
