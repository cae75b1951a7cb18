"""
Bearer token issuance and inspection (HS256 JWTs via PyJWT).

Credentials are checked against the single account configured through
``AUTH_USERNAME`` / ``AUTH_PASSWORD``.
"""
import hmac
import logging
from datetime import datetime, timedelta, timezone

import jwt

from articles_api.config import Settings, settings as default_settings
from articles_api.exceptions import UnauthorizedError
from articles_api.schemas import TokenResponse

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def validate_credentials(username: str, password: str, settings: Settings = default_settings) -> bool:
    user_ok = hmac.compare_digest(username.encode(), settings.AUTH_USERNAME.encode())
    password_ok = hmac.compare_digest(password.encode(), settings.AUTH_PASSWORD.encode())
    return user_ok and password_ok


def create_access_token(username: str, settings: Settings = default_settings) -> TokenResponse:
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    claims = {
        "sub": username,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(claims, settings.JWT_SECRET, algorithm=ALGORITHM)
    return TokenResponse(token=token, expires_at=expires_at, username=username)


def decode_access_token(token: str, settings: Settings = default_settings) -> dict:
    """Return the verified claims of *token*, or raise ``UnauthorizedError``."""
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={"require": ["sub", "exp", "iss", "aud"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise UnauthorizedError("Invalid token") from exc
