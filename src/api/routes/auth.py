"""Authentication routes (login, token validation)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_token_config, get_user_repo
from api.models import JwtResponse, LoginRequest, TokenValidationRequest
from domain.model.errors import AccountInactiveError, InfrastructureError, InvalidCredentialsError
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=JwtResponse)
async def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    config: TokenConfig = Depends(get_token_config),
):
    """Login user and return a bearer token.

    Raises:
        HTTPException: 401 if credentials are invalid, 403 if the account is inactive
    """
    try:
        result = auth_service.login(repo, request.email, request.password, config)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AccountInactiveError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except InfrastructureError as e:
        logger.error("User store failure during login", extra={"error": str(e)})
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable")

    return JwtResponse(
        token=result.token,
        type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        role=result.role,
    )


@router.post("/validate", response_model=bool)
async def validate(
    request: TokenValidationRequest,
    config: TokenConfig = Depends(get_token_config),
) -> bool:
    """Return whether the token is correctly signed and unexpired."""
    return auth_service.validate_token(request.token, config)
