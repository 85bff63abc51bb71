"""
Sender backed by the Telegram Bot API.

Posts the long-form summary as an HTML message with ``sendMessage``.
Transport errors are retried with exponential backoff via tenacity; an
``ok: false`` answer is final and raises ``SendError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from dto.summary import Summary
from senders.base import SendError, Sender

logger = logging.getLogger(__name__)

_API_BASE = "https://api.telegram.org"

_MAX_RETRIES = 4
_MIN_WAIT_SECONDS = 2
_MAX_WAIT_SECONDS = 60

_RETRYABLE_EXCEPTIONS = (httpx.TransportError,)

_retry_decorator = retry(
    retry=retry_if_exception_type(_RETRYABLE_EXCEPTIONS),
    stop=stop_after_attempt(_MAX_RETRIES),
    wait=wait_exponential(multiplier=1, min=_MIN_WAIT_SECONDS, max=_MAX_WAIT_SECONDS),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


class TelegramSender(Sender):

    name = "telegram"

    def __init__(
        self,
        token: str,
        chat_id: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._chat_id = chat_id
        self._client = httpx.Client(
            base_url=f"{_API_BASE}/bot{token}/",
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    @_retry_decorator
    def _send_message(self, payload: Dict[str, Any]) -> None:
        resp = self._client.post("sendMessage", json=payload)
        try:
            body = resp.json()
        except ValueError as exc:
            raise SendError(
                f"Undecodable response from Telegram (HTTP {resp.status_code})"
            ) from exc

        if not body.get("ok"):
            raise SendError(f"From Telegram: {body.get('description', 'unknown error')}")

    def send(self, summary: Summary) -> None:
        self._send_message(
            {
                "chat_id": self._chat_id,
                "text": summary.long_form,
                "parse_mode": "HTML",
            }
        )
        logger.info("  -> %s sent to Telegram", summary.report_name)
