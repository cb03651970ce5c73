"""Shared fixtures for auth unit tests"""

import pytest

from pagesmith.auth.gate import AdminGate
from pagesmith.auth.tokens import SessionCodec
from pagesmith.config import AuthConfig


SECRET = b"test-secret"


@pytest.fixture(name="auth_config")
def auth_config_fixture():
    return AuthConfig(
        secret=SECRET,
        admin_username="admin",
        admin_password_hash="$scrypt$unused",
        session_ttl_ms=3600 * 1000,
    )


@pytest.fixture(name="codec")
def codec_fixture(auth_config):
    return SessionCodec(auth_config)


@pytest.fixture(name="gate")
def gate_fixture(codec):
    return AdminGate(codec)
