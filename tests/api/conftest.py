import pytest
from fastapi.testclient import TestClient

from otp_auth.main import create_app
from otp_auth.presentation.dependencies import (
    get_clock,
    get_hash_password,
    get_otp_notifier,
    get_verify_password,
)
from otp_auth.settings import Settings
from tests.fakes import hash_password_stub, verify_password_stub


@pytest.fixture()
def app_and_deps(notifier, clock):
    """
    Fresh app (and therefore fresh stores) per test with:
      - cheap password hashing stubs instead of bcrypt
      - a recording notifier
      - a controllable clock
    """
    app = create_app(Settings(otp_ttl_seconds=120, cors_allow_origins=["*"]))

    app.dependency_overrides[get_hash_password] = lambda: hash_password_stub
    app.dependency_overrides[get_verify_password] = lambda: verify_password_stub
    app.dependency_overrides[get_otp_notifier] = lambda: notifier
    app.dependency_overrides[get_clock] = lambda: clock

    try:
        yield app, notifier, clock
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)


def register(client, username="alice", password="Secr3t!"):
    return client.post("/api/register", json={"username": username, "password": password})


def login(client, username="alice", password="Secr3t!"):
    return client.post("/api/login", json={"username": username, "password": password})


def verify(client, otp, username="alice"):
    return client.post("/api/verify-otp", json={"username": username, "otp": otp})
