from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academy.auth.deps import get_current_user, get_jwt_config
from academy.auth.jwt_tokens import create_access_token
from academy.auth.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password
from academy.core.db import get_db
from academy.models import User, UserRole

log = logging.getLogger("academy.auth")

router = APIRouter(prefix="/api/auth", tags=["auth"])


class SignupIn(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class LoginIn(BaseModel):
    email: str | None = None
    password: str | None = None
    role: str | None = None


def _user_out(user: User) -> dict:
    return {
        "id": user.id,
        "tenant_id": user.tenant_id,
        "name": user.full_name,
        "email": user.email,
        "role": user.role,
    }


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(payload: SignupIn, db: Session = Depends(get_db)):
    if not (payload.name and payload.email and payload.password and payload.role):
        raise HTTPException(
            status_code=400,
            detail="Missing required fields: name, email, password, and role are needed",
        )
    if payload.role not in {r.value for r in UserRole}:
        raise HTTPException(status_code=400, detail=f"Unknown role: {payload.role}")
    if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(status_code=400, detail="Password must not exceed 72 bytes")

    user = User(
        full_name=payload.name.strip(),
        email=payload.email.strip().lower(),
        password_hash=hash_password(payload.password),
        role=payload.role,
    )
    db.add(user)
    try:
        db.flush()
        # every new account is its own tenant
        user.tenant_id = user.id
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="A user with this email already exists")
    db.refresh(user)

    log.info("user %s signed up as %s", user.id, user.role)
    return {"message": "User created successfully", "user": _user_out(user), "tenant_id": user.tenant_id}


@router.post("/login")
def login(payload: LoginIn, db: Session = Depends(get_db)):
    if not (payload.email and payload.password and payload.role):
        raise HTTPException(status_code=400, detail="Missing email, password, or role")

    user = db.execute(
        select(User).where(User.email == payload.email.strip().lower())
    ).scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if user.role != payload.role:
        raise HTTPException(status_code=403, detail=f"Access denied: you must log in as a {user.role}")

    token = create_access_token(
        get_jwt_config(),
        user.id,
        tenant_id=user.tenant_id,
        email=user.email,
        role=user.role,
    )
    return {"message": "Login success", "token": token, "user": _user_out(user)}


@router.get("/me")
def me(user: User = Depends(get_current_user)):
    return _user_out(user)
