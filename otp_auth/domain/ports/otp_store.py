from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from otp_auth.domain.entities import OTPEntry


class OTPStorePort(Protocol):
    def put(self, username: str, code: str, expires_at: datetime) -> None:
        """Store/replace the pending code for username."""

    def get(self, username: str) -> Optional[OTPEntry]:
        """Return the pending code for username, or None."""

    def remove(self, username: str) -> None:
        """Delete any pending code. Removing a missing entry is not an error."""
