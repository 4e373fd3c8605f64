import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from otp_auth.domain.errors import (
    DomainError,
    InternalError,
    InvalidCredentials,
    InvalidInput,
    InvalidOTP,
    NoPendingOTP,
    OTPExpired,
    UserAlreadyExists,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    UserAlreadyExists: status.HTTP_409_CONFLICT,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    NoPendingOTP: status.HTTP_401_UNAUTHORIZED,
    OTPExpired: status.HTTP_401_UNAUTHORIZED,
    InvalidOTP: status.HTTP_401_UNAUTHORIZED,
}


def status_for(exc: DomainError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _message(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"message": ...}."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _message(status_for(exc), exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(
            "rejected request body",
            extra={"path": request.url.path, "errors": len(exc.errors())},
        )
        return _message(status.HTTP_400_BAD_REQUEST, "Invalid JSON")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _message(exc.status_code, str(exc.detail), headers=exc.headers)

    # Must sit inside CORSMiddleware: install before CORS is added.
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "unhandled exception",
                exc_info=exc,
                extra={"path": request.url.path},
            )
            return _message(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
            )
