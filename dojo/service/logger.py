"""A request-scoped logger that carries fields and masks personal data."""

from __future__ import annotations

import copy
import json
import logging
import re
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from dojo.service.env import getenv_bool
from dojo.service.masking import mask_sensitive

UID_FIELD = "uid"
EVENT_FIELD = "event"
CORRELATION_ID_FIELD = "correlationID"
SESSION_ID_FIELD = "sessionID"

_log = logging.getLogger(__name__)
_BARE = re.compile(r"[A-Za-z0-9\-._/@^+]*")


def _quote(value: str) -> str:
    if _BARE.fullmatch(value):
        return value
    return json.dumps(value, ensure_ascii=False)


def _render(message: str, fields: dict[str, str]) -> str:
    parts = [f"msg={_quote(message)}"]
    parts.extend(f"{key}={_quote(value)}" for key, value in sorted(fields.items()))
    return " ".join(parts)


class AppLogger:
    """Logger bound to a correlation id, with extra ``key=value`` fields on every line."""

    def __init__(self, correlation_id: str = "") -> None:
        self.correlation_id = correlation_id
        self.session_id = ""
        self.uid = ""
        self.event = ""
        self._fields: dict[str, str] = {CORRELATION_ID_FIELD: correlation_id or "-"}
        self.level = logging.DEBUG if getenv_bool("DEBUG_MODE", False) else logging.INFO

    @property
    def fields(self) -> dict[str, str]:
        return dict(self._fields)

    def set_session_id(self, session_id: str) -> None:
        self.session_id = session_id
        self._fields[SESSION_ID_FIELD] = session_id

    def set_uid(self, uid: Any) -> None:
        self.uid = str(uid)
        self._fields[UID_FIELD] = self.uid

    def set_event(self, event: Any) -> None:
        self.event = str(event)
        self._fields[EVENT_FIELD] = self.event

    def with_field(self, key: str, value: Any) -> AppLogger:
        """A copy of this logger with one more field; this logger is unchanged."""
        clone = copy.copy(self)
        clone._fields = {**self._fields, key: str(value)}
        return clone

    def _emit(self, level: int, message: str) -> None:
        if level < self.level:
            return
        _log.log(level, _render(message, self._fields), extra={"fields": dict(self._fields)})

    def log_error_with_stack_trace(self, error: Any) -> None:
        """Log ``error`` at error level with its traceback folded onto one line."""
        if isinstance(error, BaseException) and error.__traceback__ is not None:
            lines = traceback.format_exception(error)
        else:
            lines = traceback.format_stack()
        stack = "".join(lines).replace("\n", "")
        self.with_field("error", str(error))._emit(logging.ERROR, f"stack={stack}")

    @contextmanager
    def log_errors(self) -> Iterator[AppLogger]:
        """Log and swallow any exception raised inside the block."""
        try:
            yield self
        except Exception as exc:
            self.log_error_with_stack_trace(exc)

    @staticmethod
    def _format(msg: Any, args: tuple[Any, ...]) -> str:
        if args:
            return str(msg) % tuple(mask_sensitive(arg) for arg in args)
        return str(mask_sensitive(msg))

    def debug(self, msg: Any, *args: Any) -> None:
        """Log at debug level; with ``args``, ``msg`` is a %-format and the args are masked."""
        if logging.DEBUG >= self.level:
            self._emit(logging.DEBUG, self._format(msg, args))

    def info(self, msg: Any, *args: Any) -> None:
        """Log at info level; with ``args``, ``msg`` is a %-format and the args are masked."""
        self._emit(logging.INFO, self._format(msg, args))