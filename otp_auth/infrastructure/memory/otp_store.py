from __future__ import annotations

from datetime import datetime
from typing import Optional

from otp_auth.domain.entities import OTPEntry
from otp_auth.domain.ports.otp_store import OTPStorePort


class InMemoryOTPStore(OTPStorePort):
    """
    At most one pending code per username.
    Expired entries stay until the next verify or login touches them.
    """

    def __init__(self) -> None:
        self._entries: dict[str, OTPEntry] = {}

    def put(self, username: str, code: str, expires_at: datetime) -> None:
        self._entries[username] = OTPEntry(code=code, expires_at=expires_at)

    def get(self, username: str) -> Optional[OTPEntry]:
        return self._entries.get(username)

    def remove(self, username: str) -> None:
        self._entries.pop(username, None)

    def __len__(self) -> int:
        return len(self._entries)
