import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from otp_auth.domain.ports.otp_notifier import OTPNotifierPort
from otp_auth.infrastructure.memory.state import InMemoryAuthState
from otp_auth.infrastructure.notifier.http_notifier import HttpOTPNotifier
from otp_auth.infrastructure.notifier.log_notifier import LoggingOTPNotifier
from otp_auth.logging import setup_logging
from otp_auth.presentation.api import api
from otp_auth.presentation.errors import install_exception_handlers
from otp_auth.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_otp_notifier(settings: Settings) -> OTPNotifierPort:
    if settings.otp_delivery == "webhook":
        return HttpOTPNotifier(
            settings.otp_webhook_url, timeout=settings.otp_webhook_timeout_seconds
        )
    return LoggingOTPNotifier()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "auth service starting",
        extra={
            "app_env": app.state.settings.app_env,
            "otp_delivery": app.state.settings.otp_delivery,
        },
    )
    try:
        yield
    finally:
        # shutdown
        notifier = app.state.otp_notifier
        if isinstance(notifier, HttpOTPNotifier):
            notifier.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="OTP Login API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    # Fresh stores per app instance; nothing survives a restart.
    app.state.auth_state = InMemoryAuthState()
    app.state.otp_notifier = build_otp_notifier(settings)

    install_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(api)
    return app


app = create_app()
