"""Reading settings from environment variables, with defaults."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def getenv(key: str, default: str = "") -> str:
    """The variable's value if it is set (even to ""), otherwise ``default``."""
    return os.environ.get(key, default)


def getenv_int(name: str, default: int = 0) -> int:
    """The variable as a 64-bit integer, or ``default`` if unset or not a plain integer."""
    value = getenv(name, "")
    if _INTEGER.fullmatch(value):
        number = int(value)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    return default


def getenv_bool(name: str, default: bool = False) -> bool:
    """The variable as a boolean (1/t/true or 0/f/false in their usual cases)."""
    value = getenv(name, "")
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    return default


def getenv_list(name: str, default: Iterable[str] = (), separator: str = ",") -> list[str]:
    """The variable split on ``separator``, or ``default`` when unset or empty."""
    value = getenv(name, "")
    if value == "":
        return list(default)
    if separator == "":
        return list(value)
    return value.split(separator)