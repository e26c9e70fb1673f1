"""Bearer token issuing and verification for the mock server.

The signing secret is hard-coded: this server exists only for local
integration tests and must never be deployed.
"""

import logging
import time
from typing import Optional

import jwt
from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

logger = logging.getLogger(__name__)

SECRET_KEY = "custom-fetch-mock-server-secret"
ALGORITHM = "HS256"
TOKEN_TTL_SECONDS = 60 * 60

DEFAULT_SUBJECT = "mock-user"
DEFAULT_ROLE = "admin"

# auto_error=False so a missing header yields our own 401 body instead of FastAPI's 403.
http_bearer_auth = HTTPBearer(auto_error=False)


class TokenClaims(BaseModel):
    """Claims carried by a mock server token."""

    sub: str
    role: str
    exp: int


def issue_token(
    sub: str = DEFAULT_SUBJECT, role: str = DEFAULT_ROLE, now: Optional[int] = None
) -> tuple[str, TokenClaims]:
    """Sign a token for ``sub``/``role`` expiring one hour from ``now``."""
    issued_at = int(time.time()) if now is None else now
    claims = TokenClaims(sub=sub, role=role, exp=issued_at + TOKEN_TTL_SECONDS)
    token = jwt.encode(claims.model_dump(), SECRET_KEY, algorithm=ALGORITHM)
    return token, claims


def verify_token(token: str) -> TokenClaims:
    """Decode and verify a token.

    Raises:
        jwt.PyJWTError: If the signature, expiry or format is invalid.
    """
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    return TokenClaims.model_validate(payload)


async def require_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(http_bearer_auth),
) -> TokenClaims:
    """FastAPI dependency guarding the ``/auth`` routes."""
    if credentials is None:
        logger.warning("Rejected request: missing bearer token.")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated: Missing bearer token.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verify_token(credentials.credentials)
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected request: invalid bearer token ({e}).")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token.",
            headers={"WWW-Authenticate": "Bearer"},
        )
