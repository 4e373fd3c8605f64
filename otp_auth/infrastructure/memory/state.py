from __future__ import annotations

import threading

from otp_auth.infrastructure.memory.credential_store import InMemoryCredentialStore
from otp_auth.infrastructure.memory.otp_store import InMemoryOTPStore


class InMemoryAuthState:
    """
    Owns both stores and the single lock that guards them.

    One instance per application (built in create_app) or per test; there is
    no module-level instance. The lock is coarse on purpose: every register,
    login and verify is serialized, across usernames too. Per-username
    sharding is the path if that ever becomes a bottleneck.
    """

    def __init__(self) -> None:
        self.users = InMemoryCredentialStore()
        self.otps = InMemoryOTPStore()
        self.lock = threading.Lock()
