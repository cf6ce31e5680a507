from __future__ import annotations

from fastapi import Depends, HTTPException, status

from academy.auth.deps import get_current_user
from academy.models import User, UserRole


def require_role(*roles: UserRole):
    allowed = {r.value for r in roles}

    def _guard(user: User = Depends(get_current_user)) -> User:
        if user.role not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied: {' or '.join(sorted(allowed))} role required",
            )
        return user

    return _guard
