import itertools

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campusnet.api.auth.auth import create_token_for_user
from campusnet.api.deps import get_db
from campusnet.models import Base, RoleEnum, User
from campusnet.models.user_model import pwd_context
from main import app

# SQLite in-memory database shared by every session through StaticPool
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password123"
# Hash once, bcrypt is slow
PASSWORD_HASH = pwd_context.hash(PASSWORD)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make(role=RoleEnum.STUDENT, branch=None, name=None, position=None):
        n = next(counter)
        user = User(
            email=f"user{n}@college.edu",
            password=PASSWORD_HASH,
            name=name or f"User {n}",
            role=role,
            branch=branch,
            position=position,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_token_for_user(user)}"}

    return _headers
