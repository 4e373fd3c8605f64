class DomainError(Exception):
    """Base class for all domain-level errors.

    ``message`` is safe to hand back to the caller; internal details go to logs.
    """

    message: str = "request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInput(DomainError):
    """A required field is missing or blank after trimming."""

    message = "Username and password required"


class UserAlreadyExists(DomainError):
    """User with the given username is already registered."""

    message = "User already exists"


class InvalidCredentials(DomainError):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    message = "Invalid credentials"


class InternalError(DomainError):
    """Hashing, randomness or delivery failure."""

    message = "Internal error"


class NoPendingOTP(DomainError):
    """No code is pending for the user (never issued or already consumed)."""

    message = "OTP not found. Login again."


class OTPExpired(DomainError):
    """The pending code outlived its validity window."""

    message = "OTP expired. Login again."


class InvalidOTP(DomainError):
    """The submitted code does not match the pending one."""

    message = "Invalid OTP"
