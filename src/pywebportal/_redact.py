"""Helpers for safe debug logging.

Login bodies carry the password and CAPTCHA, token responses carry the
bearer token, and every request carries an encrypted ``LocalName``.  These
are masked before anything reaches a DEBUG log.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "passwordotpvalue",
        "token",
        "authorization",
        "localname",
        "captcha",
        "hidden",
    }
)


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a redacted copy of a decoded portal JSON value.

    Values under sensitive keys are replaced, ``Bearer`` strings are masked
    wherever they appear, and long strings (photos arrive base64 encoded)
    are truncated.
    """
    if isinstance(value, str):
        if value.startswith("Bearer "):
            return "Bearer <redacted>"
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>" if str(k).lower() in _SENSITIVE_VALUE_KEYS else redact_for_log(v, max_string=max_string)
            for k, v in value.items()
        }

    if isinstance(value, list):
        return [redact_for_log(v, max_string=max_string) for v in value]

    return value
