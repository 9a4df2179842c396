"""Day key derivation."""

from __future__ import annotations

from datetime import date as _date

from pywebportal._constants import KEY_PREFIX, KEY_SIZE, KEY_SUFFIX
from pywebportal._crypto.date_seq import encode_date_sequence
from pywebportal.exceptions import KeyDerivationError


def derive_key(date: _date | None = None) -> bytes:
    """Derive the AES-128 key for a calendar day.

    The key is the UTF-8 encoding of ``"qa8y" + digest + "ty1pn"``.  Nothing
    is cached: a call made after midnight yields the next day's key.

    Raises
    ------
    KeyDerivationError
        If the key material is not exactly 16 bytes.
    """
    key = f"{KEY_PREFIX}{encode_date_sequence(date)}{KEY_SUFFIX}".encode()
    if len(key) != KEY_SIZE:
        raise KeyDerivationError(f"derived key must be {KEY_SIZE} bytes (got {len(key)})")
    return key
