import pytest

from otp_auth.infrastructure.memory.state import InMemoryAuthState
from otp_auth.infrastructure.memory.uow import InMemoryUnitOfWork
from tests.fakes import (
    FakeClock,
    FakeNotifier,
    hash_password_stub as _hash_password_stub,
    verify_password_stub as _verify_password_stub,
)


@pytest.fixture()
def state():
    return InMemoryAuthState()


@pytest.fixture()
def uow(state):
    return InMemoryUnitOfWork(state)


@pytest.fixture()
def notifier():
    return FakeNotifier()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def hash_password_stub():
    return _hash_password_stub


@pytest.fixture()
def verify_password_stub():
    return _verify_password_stub


@pytest.fixture(autouse=True)
def patch_code(monkeypatch):
    """
    Make the 6-digit code deterministic in all tests.
    You can override in a specific test by re-monkeypatching.
    """
    from otp_auth.domain import services as domain_services

    monkeypatch.setattr(domain_services, "generate_6digit_code", lambda: "482913")
    yield
