"""JSON payload envelope: compact JSON, AES-CBC, base64."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from datetime import date as _date
from typing import Any

from pywebportal._crypto.aes import decrypt_bytes, encrypt_bytes
from pywebportal.exceptions import DecryptionError, EnvelopeError

_logger = logging.getLogger(__name__)


def seal_payload(payload: Any, *, date: _date | None = None) -> str:
    """Serialize *payload* to JSON, encrypt it and return base64 text.

    Raises
    ------
    EnvelopeError
        If *payload* is not JSON-serializable.
    """
    try:
        raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EnvelopeError(f"payload is not JSON-serializable: {exc}") from exc
    return base64.b64encode(encrypt_bytes(raw, date=date)).decode("ascii")


def open_payload(envelope: str | bytes, *, date: _date | None = None) -> Any:
    """Decode, decrypt and JSON-parse a sealed envelope.

    Raises
    ------
    EnvelopeError
        If base64 decoding, decryption, UTF-8 decoding or JSON parsing fails.
        The original failure is chained as ``__cause__``.
    """
    try:
        ciphertext = base64.b64decode(envelope, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EnvelopeError(f"envelope is not valid base64: {exc}") from exc

    try:
        raw = decrypt_bytes(ciphertext, date=date)
    except DecryptionError as exc:
        _logger.debug("Envelope decryption failed (%d bytes)", len(ciphertext))
        raise EnvelopeError(f"envelope could not be decrypted: {exc}") from exc

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise EnvelopeError(f"envelope plaintext is not JSON: {exc}") from exc
