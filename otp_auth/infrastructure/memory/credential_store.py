from __future__ import annotations

from typing import Optional

from otp_auth.domain.entities import User
from otp_auth.domain.ports.credential_store import CredentialStorePort


class InMemoryCredentialStore(CredentialStorePort):
    """Username -> User mapping. Not thread-safe on its own; see InMemoryAuthState."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def insert(self, user: User) -> None:
        self._users[user.username] = user

    def __len__(self) -> int:
        return len(self._users)
