from __future__ import annotations

from passlib.context import CryptContext

from otp_auth.settings import get_settings

# One global context; bcrypt is the only scheme we use.
# Passwords past bcrypt's 72-byte limit are refused instead of truncated.
_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__truncate_error=True)
_MAX_PASSWORD_BYTES = _pwd.handler("bcrypt").truncate_size


def hash_password(plain: str, *, rounds: int | None = None) -> str:
    """
    Hash a password using bcrypt. If rounds is None, use settings.bcrypt_rounds.
    Raises passlib's PasswordTruncateError (a ValueError) above 72 bytes.
    """
    if rounds is None:
        rounds = int(get_settings().bcrypt_rounds)
    return _pwd.hash(plain, rounds=rounds)


def verify_password(plain: str, password_hash: str) -> bool:
    """
    Verify a password against its bcrypt hash (safe timing).
    A hash passlib cannot parse, or a password bcrypt would truncate,
    never verifies.
    """
    if len(plain.encode("utf-8")) > _MAX_PASSWORD_BYTES:
        return False
    try:
        return _pwd.verify(plain, password_hash)
    except ValueError:
        return False
