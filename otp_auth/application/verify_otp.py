import logging
from datetime import datetime
from typing import Callable, Optional

import otp_auth.domain.services as domain_services
from otp_auth.domain.errors import InvalidInput, InvalidOTP, NoPendingOTP, OTPExpired
from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort

logger = logging.getLogger(__name__)


def verify_otp(
    uow: UnitOfWorkPort,
    username: str,
    code: str,
    clock: Optional[Callable[[], datetime]] = None,
) -> None:
    username = domain_services.normalize_field(username)
    code = domain_services.normalize_field(code)
    if not username or not code:
        raise InvalidInput("Username and OTP required")

    with uow as transaction:
        entry = transaction.otps.get(username)
        if entry is None:
            raise NoPendingOTP()

        if entry.is_expired((clock or domain_services.utcnow)()):
            transaction.otps.remove(username)
            raise OTPExpired()

        # A wrong guess leaves the pending code in place until it expires.
        if not domain_services.secure_compare(code, entry.code):
            logger.info("otp mismatch", extra={"username": username})
            raise InvalidOTP()

        transaction.otps.remove(username)

    logger.info("otp verified", extra={"username": username})
