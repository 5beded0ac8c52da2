from unittest.mock import patch

import pytest
import requests
import responses

from dojo.service.retry import (
    ExternalCallError,
    ExternalResponse,
    StopRetry,
    call_external_api,
    call_external_api as _call,
    retry_call,
)

URL = "https://api.example.com/items"


class Flaky:
    def __init__(self, failures, result="done", error=ValueError):
        self.failures = failures
        self.result = result
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error("failed")
        return self.result


def test_retry_call_returns_first_success():
    func = Flaky(0)
    with patch("dojo.service.retry.time.sleep") as sleep:
        assert retry_call(3, 1.0, func) == "done"
    assert func.calls == 1
    assert sleep.call_count == 0


def test_retry_call_retries_until_success():
    func = Flaky(2)
    with patch("dojo.service.retry.time.sleep") as sleep:
        assert retry_call(3, 1.0, func) == "done"
    assert func.calls == 3
    assert sleep.call_count == 2


def test_retry_call_raises_after_attempts_run_out():
    func = Flaky(10)
    with patch("dojo.service.retry.time.sleep"):
        with pytest.raises(ValueError):
            retry_call(2, 1.0, func)
    assert func.calls == 2


@pytest.mark.parametrize("attempts", [0, 1, -3])
def test_retry_call_always_calls_once(attempts):
    func = Flaky(10)
    with patch("dojo.service.retry.time.sleep") as sleep:
        with pytest.raises(ValueError):
            retry_call(attempts, 1.0, func)
    assert func.calls == 1
    assert sleep.call_count == 0


def test_stop_retry_raises_wrapped_error_immediately():
    calls = []

    def func():
        calls.append(1)
        raise StopRetry(KeyError("x"))

    with patch("dojo.service.retry.time.sleep") as sleep:
        with pytest.raises(KeyError):
            retry_call(5, 1.0, func)
    assert len(calls) == 1
    assert sleep.call_count == 0


def test_retry_pauses_grow_with_jitter():
    func = Flaky(10)
    with patch("dojo.service.retry.time.sleep") as sleep:
        with pytest.raises(ValueError):
            retry_call(3, 1.0, func)
    first, second = (c.args[0] for c in sleep.call_args_list)
    assert 1.0 <= first <= 1.5
    assert 2 * first <= second <= 3 * first


def test_call_external_api_success():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"ok", status=200)
        result = call_external_api(requests.Request("GET", URL), timeout=5, attempts=3)
    assert result == ExternalResponse(body=b"ok", status_code=200, error=None)
    assert result.ok


def test_call_external_api_client_error_not_retried():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, URL, body=b"missing", status=404)
        with patch("dojo.service.retry.time.sleep"):
            result = call_external_api(requests.Request("GET", URL), timeout=5, attempts=3)
        assert len(rsps.calls) == 1
    assert result.status_code == 404
    assert result.body == b"missing"
    assert isinstance(result.error, ExternalCallError)
    assert str(result.error) == "client error: 404"
    with pytest.raises(ExternalCallError):
        result.raise_for_error()


def test_call_external_api_retries_server_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=503)
        rsps.add(responses.GET, URL, body=b"ok", status=200)
        with patch("dojo.service.retry.time.sleep"):
            result = call_external_api(requests.Request("GET", URL), timeout=5, attempts=2)
        assert len(rsps.calls) == 2
    assert result.status_code == 200
    assert result.error is None


def test_call_external_api_server_error_exhausts_attempts():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=503)
        with patch("dojo.service.retry.time.sleep"):
            result = call_external_api(requests.Request("GET", URL), timeout=5, attempts=2)
        assert len(rsps.calls) == 2
    assert result.status_code == 503
    assert str(result.error) == "server error: 503"
    assert result.error.status_code == 503


def test_call_external_api_network_failure_reports_500():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=requests.ConnectionError("unreachable"))
        with patch("dojo.service.retry.time.sleep"):
            result = _call(requests.Request("GET", URL), timeout=5, attempts=1)
    assert result.status_code == 500
    assert result.body == b""
    assert str(result.error).startswith("server error: ")
    assert not result.ok


def test_call_external_api_resends_post_body():
    payload = b'{"a": 1}'
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, URL, status=500)
        rsps.add(responses.POST, URL, body=b"ok", status=200)
        with patch("dojo.service.retry.time.sleep"):
            result = call_external_api(
                requests.Request("POST", URL, data=payload), timeout=5, attempts=2
            )
        bodies = [call.request.body for call in rsps.calls]
    assert bodies == [payload, payload]
    assert result.status_code == 200


def test_call_external_api_reads_attempts_from_env(monkeypatch):
    monkeypatch.setenv("ATTEMPTS", "3")
    monkeypatch.setenv("TIMEOUTSEC", "5")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, status=502)
        with patch("dojo.service.retry.time.sleep"):
            result = call_external_api(requests.Request("GET", URL))
        assert len(rsps.calls) == 3
    assert result.status_code == 502
    assert result.error is not None and result.error.status_code == 502