from __future__ import annotations

from datetime import datetime
from typing import Protocol


class OTPNotifierPort(Protocol):
    def deliver(
        self, username: str, code: str, expires_at: datetime, valid_for_seconds: int
    ) -> None:
        """
        Send the one-time code to the user out-of-band.
        valid_for_seconds is the window measured on the issuer's clock.
        """
