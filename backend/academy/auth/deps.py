from __future__ import annotations

import logging
from typing import Any

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from academy.auth.jwt_tokens import JwtConfig, decode_access_token
from academy.core.config import settings
from academy.core.db import get_db
from academy.models import User

log = logging.getLogger("academy.auth")

bearer_scheme = HTTPBearer(auto_error=False)


def get_jwt_config() -> JwtConfig:
    return JwtConfig.from_settings(settings)


def _decode(token: str) -> dict[str, Any]:
    try:
        return decode_access_token(get_jwt_config(), token)
    except jwt.PyJWTError as e:
        log.debug("rejected token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: token is invalid or expired",
        )


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    if credentials is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized: token missing")
    return _decode(credentials.credentials)


def get_optional_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any] | None:
    """Claims when a bearer token is sent, None for anonymous calls."""
    if credentials is None:
        return None
    return _decode(credentials.credentials)


def get_tenant_id(claims: dict[str, Any] = Depends(get_token_claims)) -> int:
    tenant_id = claims.get("tenant_id")
    if tenant_id is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: token lacks tenant scope",
        )
    return int(tenant_id)


def get_current_user(
    db: Session = Depends(get_db),
    claims: dict[str, Any] = Depends(get_token_claims),
) -> User:
    user = db.get(User, int(claims["sub"]))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user
