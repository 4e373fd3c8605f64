from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    username: str
    password_hash: str

    def __post_init__(self):
        if not self.username:
            raise ValueError("username is required")
        if not self.password_hash:
            raise ValueError("password_hash is required")


@dataclass(frozen=True)
class OTPEntry:
    code: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        # Valid up to and including expires_at.
        return now > self.expires_at
