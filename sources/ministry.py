"""
Fetches the vaccination report from the Ministry of Health website.

  - ``fetch_current_name`` scrapes the landing page for the link to the
    latest ``Informe_Comunicacion_YYYYMMDD.ods``.
  - ``fetch_report`` downloads it; ``None`` means "not published yet"
    (any non-200 answer), which is not an error.

Transport failures (connection, timeout) are retried with exponential
backoff and re-raised once retries run out.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://www.mscbs.gob.es/profesionales/saludPublica/ccayes/alertasActual/nCov/"
PAGE_PATH = "vacunaCovid19.htm"
DOCUMENTS_PATH = "documentos/"

REPORT_NAME_RE = re.compile(r"documentos/(Informe_Comunicacion_[0-9]{8}\.ods)")

_DEFAULT_TIMEOUT_SECONDS = 10.0

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


class FetchError(Exception):
    """The landing page did not look the way it should."""


class MinistryClient:
    """Thin HTTP client for the ministry's vaccination pages."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = _DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "MinistryClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @_retry_decorator
    def fetch_current_name(self) -> str:
        """Return the file name of the report currently linked from the page."""
        resp = self._client.get(PAGE_PATH)
        resp.raise_for_status()

        m = REPORT_NAME_RE.search(resp.text)
        if m is None:
            raise FetchError("No link to report found in HTML")
        return m.group(1)

    @_retry_decorator
    def fetch_report(self, name: str) -> Optional[bytes]:
        """Download report *name*; ``None`` if it is not available yet."""
        resp = self._client.get(DOCUMENTS_PATH + name)
        if resp.status_code != httpx.codes.OK:
            logger.info("  Report %s not available (HTTP %d)", name, resp.status_code)
            return None
        return resp.content
