# tests/conftest.py
import httpx
import pytest
from fastapi.testclient import TestClient

from ticketgate.core import database
from ticketgate.core.auth import IdentityVerifier, get_verifier
from ticketgate.core.config import get_settings
from ticketgate.main import app

GOOD_ID = "client-abc"
GOOD_SECRET = "s3cret"
AUTH = {"client_id": GOOD_ID, "client_secret": GOOD_SECRET}
BASE_URL = "https://tickets.example.com"
IDENTITY = {"taxId": "12345", "firstName": "Ana", "lastName": "Horvat"}


class TokenAuthority:
    """Stands in for the OAuth token endpoint and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        form = dict(httpx.QueryParams(request.content.decode()))
        self.calls.append(form)
        if form.get("client_id") == GOOD_ID and form.get("client_secret") == GOOD_SECRET:
            return httpx.Response(
                200,
                json={"access_token": "tok", "token_type": "Bearer", "expires_in": 86400},
            )
        return httpx.Response(401, json={"error": "access_denied"})


@pytest.fixture
def authority():
    return TokenAuthority()


@pytest.fixture
def client(tmp_path, monkeypatch, authority):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'tickets.db'}")
    monkeypatch.setenv("EXTERNAL_URL", BASE_URL)
    monkeypatch.setenv("AUTO_MIGRATE", "true")
    get_settings.cache_clear()

    app.dependency_overrides[get_verifier] = lambda: IdentityVerifier(
        "auth.example.com", transport=httpx.MockTransport(authority)
    )
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def db(client):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_headers():
    return dict(AUTH)


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def issue(client, auth_headers):
    """POST /generate-ticket with valid credentials unless headers are given."""

    def _issue(body=None, headers=None):
        return client.post(
            "/generate-ticket",
            json=IDENTITY if body is None else body,
            headers=auth_headers if headers is None else headers,
        )

    return _issue
