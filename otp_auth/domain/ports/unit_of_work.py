from __future__ import annotations

from types import TracebackType
from typing import Protocol, Type

from otp_auth.domain.ports.credential_store import CredentialStorePort
from otp_auth.domain.ports.otp_store import OTPStorePort


class UnitOfWorkPort(Protocol):
    """
    Exclusive section over both stores.

    Usage:
        with uow as tx:
            if tx.users.find(username) is None:
                tx.users.insert(user)

    Everything inside the block runs under one lock shared by the credential
    store and the OTP store, so no caller observes a half-applied change.
    """

    users: CredentialStorePort
    otps: OTPStorePort

    def __enter__(self) -> "UnitOfWorkPort":
        """Acquire the lock guarding both stores."""

    def __exit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        """Release the lock."""
