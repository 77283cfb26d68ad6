import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from travel_journal.core.database import Base, get_db
from travel_journal.main import app

# Use an in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def register(client, name, email, password="password123"):
    """
    Registers a user and returns (user_id, auth headers). The session cookie
    set by the response is dropped so later requests are anonymous unless
    they pass the headers.
    """
    res = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert res.status_code == 200, res.text
    client.cookies.clear()
    headers = {"Authorization": f"Bearer {res.json()['access_token']}"}
    me = client.get("/api/auth/me", headers=headers)
    return me.json()["id"], headers


def trip_body(user_id, **overrides):
    body = {
        "title": "Поездка в Санкт-Петербург",
        "description": "Эрмитаж и Петергоф",
        "location": "Санкт-Петербург, Россия",
        "startDate": "2023-06-10",
        "endDate": "2023-06-17",
        "latitude": 59.9343,
        "longitude": 30.3351,
        "totalCost": 45000,
        "imageUrl": "https://example.com/spb.jpg",
        "isPublic": True,
        "userId": user_id,
    }
    body.update(overrides)
    return body


@pytest.fixture
def alice(client):
    return register(client, "Alice", "alice@example.com")


@pytest.fixture
def bob(client):
    return register(client, "Bob", "bob@example.com")
