import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from articles_api.dependencies import get_token_claims
from articles_api.exceptions import InvalidOperationError, UnauthorizedError
from articles_api.schemas import LoginRequest, TokenResponse, TokenValidationResponse
from articles_api.security import create_access_token, validate_credentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest):
    if not data.username.strip() or not data.password.strip():
        raise InvalidOperationError("Username and password are required")

    if not validate_credentials(data.username, data.password):
        logger.warning("Failed login attempt for username=%r", data.username)
        raise UnauthorizedError("Invalid username or password")

    logger.info("Issued token for username=%r", data.username)
    return create_access_token(data.username)


@router.post("/validate", response_model=TokenValidationResponse)
async def validate_token(claims: dict = Depends(get_token_claims)):
    return TokenValidationResponse(
        message="Token is valid",
        username=claims["sub"],
        expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
    )
