from __future__ import annotations

from types import TracebackType
from typing import Type

from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort
from otp_auth.infrastructure.memory.credential_store import InMemoryCredentialStore
from otp_auth.infrastructure.memory.otp_store import InMemoryOTPStore
from otp_auth.infrastructure.memory.state import InMemoryAuthState


class InMemoryUnitOfWork(UnitOfWorkPort):
    """Reusable, non-reentrant: each ``with`` block takes the state lock once."""

    def __init__(self, state: InMemoryAuthState) -> None:
        self._state = state
        self.users: InMemoryCredentialStore = state.users
        self.otps: InMemoryOTPStore = state.otps

    def __enter__(self) -> "InMemoryUnitOfWork":
        self._state.lock.acquire()
        return self

    def __exit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self._state.lock.release()
