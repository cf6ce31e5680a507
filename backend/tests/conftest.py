import os

import pytest

# Test environment: must be set before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"

from fastapi.testclient import TestClient

from academy.auth.deps import get_jwt_config
from academy.auth.jwt_tokens import create_access_token
from academy.core.db import Base, SessionLocal, engine
from academy.main import app
from academy.models import User


# ---------------------------------------------------------
# DB Setup Fixture
# ---------------------------------------------------------
@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------
# Helper: user + bearer token
# ---------------------------------------------------------
def make_user(db, *, email="staff@academy.test", role="staff", name="Staff User", tenant_id=None):
    user = User(full_name=name, email=email, password_hash="x", role=role)
    db.add(user)
    db.flush()
    user.tenant_id = tenant_id if tenant_id is not None else user.id
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user) -> dict:
    token = create_access_token(
        get_jwt_config(),
        user.id,
        tenant_id=user.tenant_id,
        email=user.email,
        role=user.role,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff(db):
    return make_user(db)


@pytest.fixture
def staff_headers(staff):
    return auth_headers(staff)
