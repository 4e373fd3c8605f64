# otp_auth/domain/services.py
from __future__ import annotations

import hmac
import secrets
from datetime import datetime, timezone

OTP_MIN = 100_000
OTP_MAX = 999_999


def generate_6digit_code() -> str:
    """
    Uniform code in [100000, 999999] from the OS CSPRNG.
    The range has no leading zeros, so every code is visibly 6 digits.
    """
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def secure_compare(a: str, b: str) -> bool:
    """
    Constant-time comparison for secrets.
    Accepts strings; falls back to bytes if needed.
    """
    try:
        # hmac.compare_digest supports str if types match
        return hmac.compare_digest(a, b)
    except TypeError:
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def normalize_field(value: str | None) -> str:
    """Strip surrounding whitespace; None becomes an empty string."""
    return (value or "").strip()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
