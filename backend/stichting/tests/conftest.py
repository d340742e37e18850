"""
Shared fixtures: a fresh app per test over in-memory SQLite.
"""
from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from stichting.core.config import Settings
from stichting.core.security import create_access_token, get_password_hash
from stichting.db.session import Database
from stichting.main import create_app
from stichting.models import Role, User

TEST_PASSWORD = "secret123"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        CORS_ORIGINS=["http://testserver"],
        RATE_LIMIT_PER_MINUTE=1000,
        MAX_UPLOAD_SIZE=1024,
    )


@pytest.fixture
def database(settings) -> Database:
    # One shared connection so every session sees the same in-memory DB
    db = Database(settings.DATABASE_URL, poolclass=StaticPool)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db_session) -> Callable[..., User]:
    def _make_user(username: str, role: Role = Role.USER, password: str = TEST_PASSWORD, **fields) -> User:
        user = User(
            username=username,
            first_name=fields.pop("first_name", username),
            last_name=fields.pop("last_name", "Test"),
            role=role,
            hashed_password=get_password_hash(password),
            must_change_password=fields.pop("must_change_password", False),
            **fields
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user("marcel", role=Role.ADMIN)


@pytest.fixture
def regular_user(make_user) -> User:
    return make_user("roelie")


@pytest.fixture
def auth_headers(settings) -> Callable[[User], Dict[str, str]]:
    def _headers(user: User) -> Dict[str, str]:
        token = create_access_token({"sub": str(user.id), "role": user.role.value}, config=settings)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def admin_headers(admin_user, auth_headers) -> Dict[str, str]:
    return auth_headers(admin_user)


@pytest.fixture
def user_headers(regular_user, auth_headers) -> Dict[str, str]:
    return auth_headers(regular_user)


@pytest.fixture
def sample_uitje_payload() -> dict:
    return {
        "title": "Stranddag Scheveningen",
        "date": "2030-06-15",
        "description": "Dagje strand",
        "collectPoint": "P+R Den Haag",
        "collectTime": "09:15",
        "published": True,
        "showOnFrontend": True,
        "events": [
            {"title": "Rondvaart Haven", "startTime": "14:00", "endTime": "15:30", "pricePP": 16.0, "order": 3},
            {"title": "Museum Bezoek", "startTime": "10:30", "endTime": "12:00", "pricePP": 12.5, "order": 1},
        ],
        "meals": [
            {"title": "Lunch", "startTime": "12:30", "endTime": "13:30", "order": 2},
        ],
        "travels": [
            {"title": "Heen", "mode": "car", "from": "P+R", "to": "Scheveningen", "order": 0},
        ],
    }


@pytest.fixture
def uitje(client, admin_headers, sample_uitje_payload) -> dict:
    response = client.post("/api/uitjes", json=sample_uitje_payload, headers=admin_headers)
    assert response.status_code == 200
    return response.json()
