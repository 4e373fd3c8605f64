from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Security / policies
    bcrypt_rounds: int = 10
    otp_ttl_seconds: int = 120

    # OTP delivery
    otp_delivery: Literal["log", "webhook"] = "log"
    otp_webhook_url: str = "http://otp-sink:8025/deliver"
    otp_webhook_timeout_seconds: float = 5.0

    # HTTP
    # "*" is a development posture; list explicit origins in production.
    cors_allow_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
