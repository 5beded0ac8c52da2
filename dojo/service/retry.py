"""Retrying calls with growing, jittered pauses, and HTTP calls built on it."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import requests

from dojo.service.env import getenv_int

T = TypeVar("T")

_INTERNAL_SERVER_ERROR = 500


class StopRetry(Exception):
    """Wraps an error that must not be retried; ``retry_call`` raises the wrapped error."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


class ExternalCallError(Exception):
    """A failed external call: a network problem or an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def retry_call(attempts: int, sleep: float, func: Callable[[], T]) -> T:
    """Call ``func`` up to ``attempts`` times (at least once), doubling the pause each time.

    Each pause is lengthened by a random jitter of up to half its length.
    """
    while True:
        try:
            return func()
        except StopRetry as stop:
            raise stop.error from None
        except Exception:
            attempts -= 1
            if attempts <= 0:
                raise
        sleep = sleep + random.uniform(0, sleep) / 2
        time.sleep(sleep)
        sleep *= 2


@dataclass(frozen=True)
class ExternalResponse:
    """Outcome of an external call; ``body`` and ``status_code`` are from the last reply."""

    body: bytes
    status_code: int
    error: ExternalCallError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def call_external_api(
    request: requests.Request | requests.PreparedRequest,
    timeout: float | None = None,
    attempts: int | None = None,
) -> ExternalResponse:
    """Send ``request``, retrying server errors and network failures.

    Client errors (4xx) are not retried. ``timeout`` and ``attempts`` default to the
    TIMEOUTSEC and ATTEMPTS environment variables; a timeout of 0 means none. When no
    reply arrives at all the status is reported as 500.
    """
    if timeout is None:
        timeout = getenv_int("TIMEOUTSEC", 0)
    if attempts is None:
        attempts = getenv_int("ATTEMPTS", 0)
    prepared = request.prepare() if isinstance(request, requests.Request) else request

    body = b""
    status_code = 0
    error: ExternalCallError | None = None

    with requests.Session() as session:

        def attempt() -> None:
            nonlocal body, status_code
            try:
                response = session.send(prepared.copy(), timeout=timeout or None)
            except requests.RequestException as exc:
                raise ExternalCallError(f"server error: {exc}") from exc
            status_code = response.status_code
            body = response.content
            if status_code >= 500:
                raise ExternalCallError(f"server error: {status_code}", status_code)
            if status_code >= 400:
                raise StopRetry(ExternalCallError(f"client error: {status_code}", status_code))

        try:
            retry_call(attempts, 1.0, attempt)
        except ExternalCallError as exc:
            error = exc

    if status_code == 0:
        status_code = _INTERNAL_SERVER_ERROR
    return ExternalResponse(body=body, status_code=status_code, error=error)