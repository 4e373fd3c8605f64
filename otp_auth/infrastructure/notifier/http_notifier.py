from __future__ import annotations

from datetime import datetime
from typing import Optional

import httpx

from otp_auth.domain.ports.otp_notifier import OTPNotifierPort


class HttpOTPNotifier(OTPNotifierPort):
    """POST the code to a webhook (SMS/email gateway, or a local sink in dev)."""

    def __init__(
        self,
        url: str,
        *,
        client: Optional[httpx.Client] = None,
        timeout: float = 5.0,
    ) -> None:
        self._url = url
        self._owns_client: bool = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def deliver(
        self, username: str, code: str, expires_at: datetime, valid_for_seconds: int
    ) -> None:
        payload = {
            "username": username,
            "code": code,
            "expires_at": expires_at.isoformat(),
            "valid_for_seconds": valid_for_seconds,
        }

        try:
            resp = self._client.post(self._url, json=payload)
            if not (200 <= resp.status_code < 300):
                text = resp.text[:200]
                raise RuntimeError(f"OTP webhook responded {resp.status_code}: {text}")
        except httpx.HTTPError as e:
            raise RuntimeError(f"OTP webhook HTTP error: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
