"""General helpers: membership and difference of collections, error logging and HTTP calls."""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, Protocol
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests

_log = logging.getLogger(__name__)


def contains_string(items: Iterable[str], item: str) -> bool:
    """Whether ``item`` is one of ``items``."""
    return any(current == item for current in items)


def get_diff(x: list | tuple, y: list | tuple, key: Callable[[Any], Hashable]) -> list:
    """Elements of ``x`` whose key does not occur among the keys of ``y``.

    Elements of ``x`` sharing a key collapse to the last of them. Both arguments must
    be collections of the same type; a TypeError is raised otherwise.
    """
    if not isinstance(x, (list, tuple)):
        raise TypeError("First parameter must be a collection")
    if not isinstance(y, (list, tuple)):
        raise TypeError("Second parameter must be a collection")
    if type(x) is not type(y):
        raise TypeError("Parameters must have the same type")

    remaining = {key(value): value for value in x}
    for value in y:
        remaining.pop(key(value), None)
    return list(remaining.values())


def log_error_with_stack_trace(error: Any) -> None:
    """Log ``error`` at error level together with a stack trace."""
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        stack = "".join(traceback.format_exception(error))
    else:
        stack = "".join(traceback.format_stack())
    _log.error("error: %s, stack trace: %s", error, stack)


def construct_request_url(
    server: str, relative_path: str, query_params: Mapping[str, str] | None = None
) -> str:
    """Resolve ``relative_path`` against ``server`` and merge ``query_params`` into its query.

    Given parameters replace any of the same name; the query is sorted by key.
    """
    parts = urlsplit(relative_path)
    query: dict[str, list[str]] = {}
    for name, value in parse_qsl(parts.query, keep_blank_values=True):
        query.setdefault(name, []).append(value)
    for name, value in (query_params or {}).items():
        query[name] = [value]
    encoded = urlencode([(name, value) for name in sorted(query) for value in query[name]])
    relative = urlunsplit(parts._replace(query=encoded))
    return urljoin(server, relative)


def _encode_body(body: Any) -> bytes:
    try:
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError):
        return b""


def _send_http_request(
    method: str,
    base_url: str,
    relative_path: str,
    query_params: Mapping[str, str] | None,
    headers: Mapping[str, str] | None,
    body: Any,
) -> requests.Response:
    url = construct_request_url(base_url, relative_path, query_params)
    return requests.request(method, url, data=_encode_body(body), headers=dict(headers or {}))


def get(
    base_url: str,
    relative_path: str,
    query_params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> requests.Response:
    """Send a GET request; the body is an empty JSON object."""
    return _send_http_request("GET", base_url, relative_path, query_params, headers, {})


def post(
    base_url: str,
    relative_path: str,
    query_params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
) -> requests.Response:
    """Send a POST request with ``body`` encoded as JSON."""
    return _send_http_request("POST", base_url, relative_path, query_params, headers, body)


class _Handler(Protocol):
    wfile: Any

    def send_response(self, code: int, message: str | None = None) -> None: ...

    def send_header(self, keyword: str, value: str) -> None: ...

    def end_headers(self) -> None: ...


def send_json_response(handler: _Handler, model: Any) -> None:
    """Write ``model`` as a 200 JSON reply through an HTTP request handler."""
    payload = json.dumps(model, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    handler.send_response(200)
    handler.send_header("Content-Type", "application/json")
    handler.send_header("Content-Length", str(len(payload)))
    handler.end_headers()
    handler.wfile.write(payload)