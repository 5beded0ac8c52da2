"""An HTTP client that tags requests with the correlation id and logs each call."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

import requests

from dojo.service import general, retry
from dojo.service.logger import AppLogger
from dojo.service.masking import mask_nric

CORRELATION_HEADER = "X-Correlation-ID"


class ApiClient:
    """Sends requests on behalf of one logger, masking NRIC numbers in logged paths."""

    def __init__(self, logger: AppLogger) -> None:
        self.logger = logger

    def _call(
        self,
        method: str,
        base_url: str,
        relative_path: str,
        send: Callable[[], requests.Response],
    ) -> requests.Response:
        target = f"{base_url}{mask_nric(relative_path)}"
        self.logger.info(f"{method} {target}")
        try:
            response = send()
        except requests.RequestException:
            self.logger.info(f"error {method} {target}")
            raise
        self.logger.with_field("status", response.status_code).info(f"done {method} {target}")
        return response

    def get(
        self,
        base_url: str,
        relative_path: str,
        query_params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """GET with the correlation id added to ``headers``."""
        headers = {} if headers is None else headers
        headers[CORRELATION_HEADER] = self.logger.correlation_id
        return self._call(
            "GET",
            base_url,
            relative_path,
            lambda: general.get(base_url, relative_path, query_params, headers),
        )

    def post(
        self,
        base_url: str,
        relative_path: str,
        query_params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> requests.Response:
        """POST with the correlation id added to ``headers``."""
        headers = {} if headers is None else headers
        headers[CORRELATION_HEADER] = self.logger.correlation_id
        return self._call(
            "POST",
            base_url,
            relative_path,
            lambda: general.post(base_url, relative_path, query_params, headers, body),
        )

    def call_external_api(
        self, request: requests.Request | requests.PreparedRequest
    ) -> retry.ExternalResponse:
        """Send ``request`` with retries, logging its status and duration."""
        path = mask_nric(urlsplit(request.url or "").path)
        self.logger.debug("calling external api %s", path)
        start = time.monotonic()

        result = retry.call_external_api(request)
        elapsed = time.monotonic() - start
        (
            self.logger.with_field("status", result.status_code)
            .with_field("duration", f"{elapsed:.6f}s")
            .info(f"done calling external api {path}")
        )

        self.logger.debug("External API Response: %s", result.body.decode("utf-8", "replace"))
        self.logger.debug("External API Error: %s", result.error)
        return result