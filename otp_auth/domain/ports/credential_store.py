from __future__ import annotations

from typing import Optional, Protocol

from otp_auth.domain.entities import User


class CredentialStorePort(Protocol):
    def find(self, username: str) -> Optional[User]:
        """Return the user registered under username, or None."""

    def insert(self, user: User) -> None:
        """
        Add a user record.
        The caller has already checked uniqueness under the same lock;
        the store does not re-validate.
        """
