from datetime import datetime
from typing import Callable

from fastapi import Request

import otp_auth.domain.services as domain_services
from otp_auth.domain.ports.otp_notifier import OTPNotifierPort
from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort
from otp_auth.infrastructure.memory.state import InMemoryAuthState
from otp_auth.infrastructure.memory.uow import InMemoryUnitOfWork
from otp_auth.infrastructure.security.password import hash_password, verify_password


def get_auth_state(request: Request) -> InMemoryAuthState:
    # This is set in otp_auth.main create_app()
    return request.app.state.auth_state


def get_uow(request: Request) -> UnitOfWorkPort:
    return InMemoryUnitOfWork(get_auth_state(request))


def get_hash_password() -> Callable[[str], str]:
    return hash_password


def get_verify_password() -> Callable[[str, str], bool]:
    return verify_password


def get_otp_ttl_seconds(request: Request) -> int:
    return request.app.state.settings.otp_ttl_seconds


def get_otp_notifier(request: Request) -> OTPNotifierPort:
    return request.app.state.otp_notifier


def get_clock() -> Callable[[], datetime]:
    return domain_services.utcnow
