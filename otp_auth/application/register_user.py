import logging
from typing import Callable

import otp_auth.domain.services as domain_services
from otp_auth.domain.entities import User
from otp_auth.domain.errors import InternalError, InvalidInput, UserAlreadyExists
from otp_auth.domain.ports.unit_of_work import UnitOfWorkPort

logger = logging.getLogger(__name__)


def register_user(
    uow: UnitOfWorkPort,
    username: str,
    password: str,
    hash_password: Callable[[str], str],
) -> None:
    username = domain_services.normalize_field(username)
    password = domain_services.normalize_field(password)
    if not username or not password:
        raise InvalidInput()

    # Hashing stays inside the lock so two registrations of one name
    # can never both pass the existence check.
    with uow as transaction:
        if transaction.users.find(username) is not None:
            raise UserAlreadyExists()
        try:
            hashed_password = hash_password(password)
        except Exception as e:
            logger.exception("password hashing failed", extra={"username": username})
            raise InternalError("Failed to hash password") from e
        transaction.users.insert(User(username=username, password_hash=hashed_password))

    logger.info("user registered", extra={"username": username})
