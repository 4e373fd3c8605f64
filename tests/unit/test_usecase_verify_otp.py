import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from otp_auth.application.login_user import login_user
from otp_auth.application.register_user import register_user
from otp_auth.application.verify_otp import verify_otp
from otp_auth.domain import services as domain_services
from otp_auth.domain.errors import InvalidInput, InvalidOTP, NoPendingOTP, OTPExpired


@pytest.fixture()
def pending(uow, notifier, hash_password_stub, verify_password_stub, clock):
    register_user(uow=uow, username="alice", password="Secr3t!", hash_password=hash_password_stub)
    login_user(
        uow=uow,
        notifier=notifier,
        username="alice",
        password="Secr3t!",
        verify_password=verify_password_stub,
        otp_ttl_seconds=120,
        clock=clock,
    )
    return notifier.last_code


def test_verify_happy_path_consumes_code(state, uow, clock, pending):
    verify_otp(uow=uow, username="alice", code=f" {pending} ", clock=clock)

    assert state.otps.get("alice") is None


def test_verify_is_single_use(uow, clock, pending):
    verify_otp(uow=uow, username="alice", code=pending, clock=clock)

    with pytest.raises(NoPendingOTP) as ei:
        verify_otp(uow=uow, username="alice", code=pending, clock=clock)
    assert ei.value.message == "OTP not found. Login again."


def test_verify_without_login(uow, clock):
    with pytest.raises(NoPendingOTP):
        verify_otp(uow=uow, username="alice", code="482913", clock=clock)


def test_verify_at_expiry_instant_still_succeeds(uow, clock, pending):
    clock.advance(120)
    verify_otp(uow=uow, username="alice", code=pending, clock=clock)


def test_expired_code_is_reclaimed(state, uow, clock, pending):
    clock.advance(121)

    with pytest.raises(OTPExpired) as ei:
        verify_otp(uow=uow, username="alice", code=pending, clock=clock)
    assert ei.value.message == "OTP expired. Login again."
    assert state.otps.get("alice") is None

    with pytest.raises(NoPendingOTP):
        verify_otp(uow=uow, username="alice", code=pending, clock=clock)


def test_expired_entry_is_reclaimed_even_for_wrong_code(state, uow, clock, pending):
    clock.advance(500)
    with pytest.raises(OTPExpired):
        verify_otp(uow=uow, username="alice", code="000000", clock=clock)
    assert len(state.otps) == 0


def test_wrong_code_keeps_pending_entry(state, uow, clock, pending):
    for guess in ("000000", "482914", "48291"):
        with pytest.raises(InvalidOTP):
            verify_otp(uow=uow, username="alice", code=guess, clock=clock)

    assert state.otps.get("alice").code == pending
    verify_otp(uow=uow, username="alice", code=pending, clock=clock)


def test_code_compared_as_string_not_number(uow, clock, pending):
    with pytest.raises(InvalidOTP):
        verify_otp(uow=uow, username="alice", code="0482913", clock=clock)


def test_stale_code_fails_after_relogin(
    uow, notifier, verify_password_stub, clock, pending, monkeypatch
):
    monkeypatch.setattr(domain_services, "generate_6digit_code", lambda: "777001")
    login_user(
        uow=uow,
        notifier=notifier,
        username="alice",
        password="Secr3t!",
        verify_password=verify_password_stub,
        otp_ttl_seconds=120,
        clock=clock,
    )

    with pytest.raises(InvalidOTP):
        verify_otp(uow=uow, username="alice", code=pending, clock=clock)
    verify_otp(uow=uow, username="alice", code="777001", clock=clock)


@pytest.mark.parametrize("username,code", [("", "482913"), ("alice", " ")])
def test_verify_blank_fields(uow, clock, username, code):
    with pytest.raises(InvalidInput) as ei:
        verify_otp(uow=uow, username=username, code=code, clock=clock)
    assert ei.value.message == "Username and OTP required"


def test_concurrent_verifies_succeed_once(uow, clock, pending):
    n = 12
    barrier = threading.Barrier(n)

    def attempt(_: int) -> str:
        barrier.wait()
        try:
            verify_otp(uow=uow, username="alice", code=pending, clock=clock)
            return "ok"
        except NoPendingOTP:
            return "gone"

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(attempt, range(n)))

    assert results.count("ok") == 1
    assert results.count("gone") == n - 1
