"""Helpers for safe debug logging.

Provider URLs can carry an account name (AISHub ``username``). This module
redacts such values before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SENSITIVE_QUERY_KEYS: frozenset[str] = frozenset(
    {
        "username",
        "user",
        "apikey",
        "api_key",
        "token",
        "password",
    }
)


def redact_url(url: str) -> str:
    """Return *url* with sensitive query parameters replaced by ``<redacted>``."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    if not any(key.lower() in _SENSITIVE_QUERY_KEYS for key, _ in pairs):
        return url
    query = [
        (key, "<redacted>" if key.lower() in _SENSITIVE_QUERY_KEYS else value)
        for key, value in pairs
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="<>")))


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a redacted copy of a flat mapping or string for debug logs."""
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value
    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if str(k).lower() in _SENSITIVE_QUERY_KEYS else redact_for_log(v, max_string=max_string)
            for k, v in value.items()
        }
    return value
