"""
Runtime settings, read from the environment (``.env`` is loaded by the
CLI entry point via python-dotenv).

    TELEGRAM_API_TOKEN        bot token; empty → print instead of sending
    UPDATES_TELEGRAM_CHAT_ID  target chat
    REPORTS_DIR               where fetched reports are kept
    REPORT_FORMAT_VERSION     extraction config version ("v1", "v2")
    REPORT_LOCALE             number formatting locale
    HTTP_TIMEOUT_SECONDS      per-request timeout
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from extractors.config import DEFAULT_VERSION


class Settings(BaseModel):
    telegram_api_token: str = ""
    telegram_chat_id: str = ""
    reports_dir: str = "reports/vaccination"
    format_version: str = DEFAULT_VERSION
    locale: str = "es"
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}

    @property
    def telegram_enabled(self) -> bool:
        return bool(self.telegram_api_token)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            telegram_api_token=env.get("TELEGRAM_API_TOKEN", ""),
            telegram_chat_id=env.get("UPDATES_TELEGRAM_CHAT_ID", ""),
            reports_dir=env.get("REPORTS_DIR", "reports/vaccination"),
            format_version=env.get("REPORT_FORMAT_VERSION", DEFAULT_VERSION),
            locale=env.get("REPORT_LOCALE", "es"),
            http_timeout_seconds=env.get("HTTP_TIMEOUT_SECONDS", "10"),
        )
