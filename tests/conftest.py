import mongomock
import pytest
from fastapi.testclient import TestClient

import database


@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("MONGODB_DB", "devconnector_test")
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient(tz_aware=True)
    database.set_client(client)
    yield client
    database.set_client(None)


@pytest.fixture
def db(mongo_client):
    return database.get_db()


@pytest.fixture
def client(mongo_client):
    from app import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register a user and return bearer headers for them."""

    def _register(email="dev@example.com", password="secret123", name="Dev User"):
        resp = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 200, resp.text
        login = client.post("/api/auth", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['token']}"}

    return _register


@pytest.fixture
def auth_headers(register_user):
    return register_user()


@pytest.fixture
def profile_payload():
    return {
        "company": "Acme",
        "website": "https://acme.dev",
        "location": "Berlin",
        "bio": "Backend developer",
        "status": "Developer",
        "githubusername": "octocat",
        "skills": "node, express , mongo",
        "youtube": "https://youtube.com/acme",
        "linkedin": "https://linkedin.com/in/acme",
    }


@pytest.fixture
def with_profile(client, auth_headers, profile_payload):
    resp = client.post("/api/profiles", json=profile_payload, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    return resp.json()
