from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import jwt  # PyJWT

ALGORITHM = "HS256"
TOKEN_TYPE = "access"

# claims every academy token must carry besides the registered ones
ACADEMY_CLAIMS = ("tenant_id", "email", "role")


@dataclass(frozen=True)
class JwtConfig:
    secret: str
    issuer: str
    audience: str
    ttl_seconds: int

    @classmethod
    def from_settings(cls, settings) -> "JwtConfig":
        return cls(
            secret=settings.JWT_SECRET,
            issuer=settings.JWT_ISS,
            audience=settings.JWT_AUD,
            ttl_seconds=settings.ACCESS_TOKEN_TTL_SECONDS,
        )


def create_access_token(
    cfg: JwtConfig,
    user_id: int,
    *,
    tenant_id: int | None,
    email: str,
    role: str,
) -> str:
    """Bearer token for a logged-in user, scoped to the user's tenant."""
    issued = int(time.time())
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "iat": issued,
        "exp": issued + cfg.ttl_seconds,
        "typ": TOKEN_TYPE,
        "tenant_id": tenant_id,
        "email": email,
        "role": role,
    }
    return jwt.encode(claims, cfg.secret, algorithm=ALGORITHM)


def decode_access_token(cfg: JwtConfig, token: str) -> dict[str, Any]:
    """Verified claims; raises a jwt.PyJWTError subclass for anything unusable."""
    claims = jwt.decode(
        token,
        cfg.secret,
        algorithms=[ALGORITHM],
        issuer=cfg.issuer,
        audience=cfg.audience,
        options={"require": ["exp", "iat", "iss", "aud", "sub"]},
    )
    if claims.get("typ") != TOKEN_TYPE:
        raise jwt.InvalidTokenError("not an access token")
    missing = [name for name in ACADEMY_CLAIMS if name not in claims]
    if missing:
        raise jwt.MissingRequiredClaimError(missing[0])
    return claims
