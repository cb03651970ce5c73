"""Shared fixtures for HTTP tests: an app on in-memory SQLite with a known admin"""

import base64
import hashlib

import pytest
from fastapi.testclient import TestClient

from pagesmith.config import Settings
from pagesmith.server.app import create_app


PASSWORD = "correct horse"


def _scrypt_hash(password: str) -> str:
    salt = b"fixed-test-salt!"
    dk = hashlib.scrypt(password.encode(), salt=salt, n=2**10, r=8, p=1, dklen=32)
    return f"$scrypt$n={2**10},r=8,p=1${base64.b64encode(salt).decode()}${base64.b64encode(dk).decode()}"


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        db_url="sqlite://",
        secret="integration-secret",
        admin_username="admin",
        admin_password_hash=_scrypt_hash(PASSWORD),
    )


@pytest.fixture(name="app")
def app_fixture(settings):
    return create_app(settings)


@pytest.fixture(name="client")
def client_fixture(app):
    # https:// so the Secure session cookie is sent back on later requests
    with TestClient(app, base_url="https://testserver") as c:
        yield c


@pytest.fixture(name="logged_in")
def logged_in_fixture(client):
    response = client.post("/.netlify/functions/auth", json={"username": "admin", "password": PASSWORD})
    assert response.status_code == 200
    return client
