from __future__ import annotations

import logging
from datetime import datetime

from otp_auth.domain.ports.otp_notifier import OTPNotifierPort

logger = logging.getLogger("otp_auth.delivery")


class LoggingOTPNotifier(OTPNotifierPort):
    """
    Development delivery channel: the code goes to the operator log.
    Swap for HttpOTPNotifier (or an SMS/email adapter) outside dev.
    """

    def deliver(
        self, username: str, code: str, expires_at: datetime, valid_for_seconds: int
    ) -> None:
        logger.info(
            "[MFA OTP] user=%s otp=%s (valid %ss)",
            username,
            code,
            valid_for_seconds,
            extra={"username": username, "expires_at": expires_at.isoformat()},
        )
