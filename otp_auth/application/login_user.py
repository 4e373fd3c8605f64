import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

import otp_auth.domain.services as domain_services
from otp_auth.domain.errors import InternalError, InvalidCredentials, InvalidInput
from otp_auth.domain.ports.otp_notifier import OTPNotifierPort
from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort

logger = logging.getLogger(__name__)


def login_user(
    uow: UnitOfWorkPort,
    notifier: OTPNotifierPort,
    username: str,
    password: str,
    verify_password: Callable[[str, str], bool],
    otp_ttl_seconds: int = 120,
    clock: Optional[Callable[[], datetime]] = None,
) -> datetime:
    """
    Check the password and, on success, issue a fresh one-time code.

    Any code still pending for the user is overwritten. Returns the new
    code's expiry; the code itself only travels through ``notifier``.
    Unknown users and wrong passwords raise the same InvalidCredentials.
    """
    username = domain_services.normalize_field(username)
    password = domain_services.normalize_field(password)
    if not username or not password:
        raise InvalidInput()

    with uow as transaction:
        user = transaction.users.find(username)

    # bcrypt runs outside the lock; users are immutable once inserted.
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login rejected", extra={"username": username})
        raise InvalidCredentials()

    try:
        code = domain_services.generate_6digit_code()
    except Exception as e:
        logger.exception("otp generation failed", extra={"username": username})
        raise InternalError("Failed to generate OTP") from e

    now = (clock or domain_services.utcnow)()
    expires_at = now + timedelta(seconds=otp_ttl_seconds)
    with uow as transaction:
        transaction.otps.put(username, code, expires_at)

    try:
        notifier.deliver(username, code, expires_at, otp_ttl_seconds)
    except Exception as e:
        logger.exception("otp delivery failed", extra={"username": username})
        raise InternalError("Failed to deliver OTP") from e

    return expires_at
